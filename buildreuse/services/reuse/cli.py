from __future__ import annotations

"""Command line entry point evaluating reuse decisions from YAML documents."""

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path
from typing import Any, List, Sequence

import yaml

from buildreuse.foundation.config import load_config

from .config import ReuseConfig
from .features import default_catalog
from .lookup import ArtifactLookup
from .matcher import Matcher
from .models import Artifact, artifact_from_mapping, request_from_mapping
from .store import MemoryArtifactStore, StaticPlatformResolver


def _load_yaml(path: str) -> Any:
    with open(path, "r", encoding="utf-8") as fh:
        return yaml.safe_load(fh)


def _load_artifacts(path: str) -> List[Artifact]:
    data = _load_yaml(path) or []
    if isinstance(data, dict):
        data = data.get("artifacts", [])
    if not isinstance(data, list):
        raise TypeError("artifacts file must hold a list or an 'artifacts' key")
    return [artifact_from_mapping(item) for item in data]


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="buildreuse-match",
        description="Report which artifacts can be reused for a build request",
    )
    parser.add_argument("--artifacts", required=True, help="YAML file listing artifacts")
    parser.add_argument("--request", help="YAML file describing the build request")
    parser.add_argument("--config", help="YAML configuration file with a reuse section")
    parser.add_argument(
        "--platform-namespace",
        help="Namespace holding artifacts (defaults to the request namespace)",
    )
    parser.add_argument(
        "--dedup",
        action="store_true",
        help="Report pairs of equivalent artifacts instead of request matches",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


async def _run_lookup(args: argparse.Namespace, config: ReuseConfig, matcher: Matcher) -> List[str]:
    request = request_from_mapping(_load_yaml(args.request) or {})
    namespaces = {}
    if args.platform_namespace:
        namespaces[request.namespace] = args.platform_namespace
    lookup = ArtifactLookup(
        MemoryArtifactStore(_load_artifacts(args.artifacts)),
        StaticPlatformResolver(namespaces),
        matcher,
        config=config,
    )
    return [a.name for a in await lookup.find(request)]


def _run_dedup(args: argparse.Namespace, matcher: Matcher) -> List[List[str]]:
    artifacts = _load_artifacts(args.artifacts)
    pairs: List[List[str]] = []
    for i, first in enumerate(artifacts):
        for second in artifacts[i + 1 :]:
            if first.namespace == second.namespace and matcher.artifacts_equivalent(first, second):
                pairs.append([first.name, second.name])
    return pairs


def main(argv: Sequence[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(list(sys.argv[1:] if argv is None else argv))
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    config = load_config(args.config).reuse if args.config else ReuseConfig()
    matcher = Matcher(default_catalog(), default_version=config.default_version)

    if args.dedup:
        result: Any = {"equivalent": _run_dedup(args, matcher)}
    else:
        if not args.request:
            parser.error("--request is required unless --dedup is given")
        if not Path(args.request).exists():
            parser.error(f"request file not found: {args.request}")
        result = {"matches": asyncio.run(_run_lookup(args, config, matcher))}
    print(json.dumps(result))
    return 0


if __name__ == "__main__":  # pragma: no cover - CLI entry
    sys.exit(main())
