"""OpenStack access checker.

Usage examples:
  # explicit credentials in a JSON file (keys: username, password, identity_endpoint, ...)
  osaccess --config access.json

  # clouds.yaml profile, internal endpoints, only compute
  osaccess --cloud mycloud --endpoint-type internal --service compute

Runs the same validation and authentication a builder would do before
touching the cloud, then prints the catalog endpoint of each requested
service.
"""
from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Any, Dict, List, Optional

from dotenv import load_dotenv
from keystoneauth1 import exceptions as ks_exceptions
from pydantic import ValidationError

from osaccess.config.settings import settings
from osaccess.core.openstack.access_config import AccessConfig

logger = logging.getLogger("osaccess")

_SERVICES = {
    "compute": AccessConfig.compute_v2_client,
    "image": AccessConfig.image_v2_client,
    "block-storage": AccessConfig.block_storage_v3_client,
}


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    ap = argparse.ArgumentParser(description="Validate OpenStack access settings and authenticate")
    ap.add_argument("--config", "-f", default=None, help="JSON file with access fields")
    ap.add_argument("--cloud", default=None, help="clouds.yaml profile name")
    ap.add_argument("--region", default=None, help="Region name")
    ap.add_argument("--endpoint-type", default=None, help="internal, admin or public")
    ap.add_argument("--insecure", action="store_true", help="Skip TLS certificate verification")
    ap.add_argument(
        "--service",
        action="append",
        choices=sorted(_SERVICES),
        default=None,
        help="Service to resolve (repeatable, default: all)",
    )
    return ap.parse_args(argv)


def load_access_config(path: Optional[str], overrides: Dict[str, Any]) -> AccessConfig:
    data: Dict[str, Any] = {}
    if path:
        with open(path, "r", encoding="utf-8") as fh:
            data = json.load(fh)
        if not isinstance(data, dict):
            raise ValueError(f"{path}: expected a JSON object, got {type(data).__name__}")
    data.update({k: v for k, v in overrides.items() if v})
    return AccessConfig(**data)


def main(argv: Optional[List[str]] = None) -> int:
    load_dotenv()
    logging.basicConfig(
        level=settings.LOG_LEVEL.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    args = parse_args(argv)

    try:
        cfg = load_access_config(
            args.config,
            {
                "cloud": args.cloud,
                "region": args.region,
                "endpoint_type": args.endpoint_type,
                "insecure": args.insecure,
            },
        )
    except (OSError, ValueError, ValidationError) as exc:
        print(f"configuration error: {exc}", file=sys.stderr)
        return 1

    config_files = [settings.OS_CLIENT_CONFIG_FILE] if settings.OS_CLIENT_CONFIG_FILE else None
    logger.debug("Access config loaded from %s (env=%s)", args.config or "command line", settings.ENV)
    errors = cfg.prepare(config_files=config_files)
    if errors:
        for err in errors:
            print(f"error: {err}", file=sys.stderr)
        return 1

    exit_code = 0
    for name in args.service or sorted(_SERVICES):
        try:
            client = _SERVICES[name](cfg)
        except ks_exceptions.EndpointNotFound as exc:
            print(f"{name}: not available ({exc})")
            exit_code = 2
            continue
        print(f"{name}: {client.get_endpoint()}")

    return exit_code


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
