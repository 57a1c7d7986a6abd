#!/usr/bin/env python3
from __future__ import annotations

import argparse
import asyncio
import getpass
import logging

from cicsplex.cmci import (
    CMCIClient,
    CMCIConnection,
    NotFoundError,
    ResourceLimitExceeded,
    ResourceQuery,
    to_escaped_criteria,
)
from cicsplex.cmci.config import CICS_LOCAL_FILE


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="List CICS local files through CMCI")
    p.add_argument("host")
    p.add_argument("port", type=int)
    p.add_argument("plex")
    p.add_argument("region", nargs="?", default=None)
    p.add_argument("--user", default=None)
    p.add_argument("--protocol", default="https", choices=["http", "https"])
    p.add_argument("--filter", default=None, help="Comma separated file names, wildcards allowed")
    p.add_argument("--increment", type=int, default=800)
    p.add_argument("--concurrency", type=int, default=1)
    p.add_argument("--insecure", action="store_true", help="Skip TLS certificate checks")
    p.add_argument("-v", "--verbose", action="store_true")
    return p.parse_args()


async def main() -> None:
    args = parse_args()
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    connection = CMCIConnection(
        host=args.host,
        port=args.port,
        protocol=args.protocol,
        user=args.user,
        password=getpass.getpass() if args.user else None,
        reject_unauthorized=not args.insecure,
    )
    criteria = to_escaped_criteria(args.filter, "FILE") if args.filter else "FILE=*"
    query = ResourceQuery(
        name=CICS_LOCAL_FILE,
        cics_plex=args.plex,
        region_name=args.region,
        criteria=criteria,
    )

    async with CMCIClient(connection) as client:
        try:
            files = await client.get_all_resources(
                query, args.increment, concurrency=args.concurrency
            )
        except NotFoundError:
            print("No local files found")
            return
        except ResourceLimitExceeded:
            print("Resource limit exceeded - set a local file filter to narrow the search")
            return

    print("=" * 65)
    print(f"Plex       : {args.plex}")
    print(f"Region     : {args.region or '-'}")
    print(f"Files      : {len(files)}")
    print("=" * 65)
    print(f"{'File':10} | {'Region':10} | {'Enabled':10} | {'Dataset'}")
    print("-" * 65)
    for f in files:
        print(
            f"{f.get('file', ''):10} | {f.get('eyu_cicsname', ''):10} | "
            f"{f.get('enablestatus', ''):10} | {f.get('dsname', '')}"
        )
    print("=" * 65)


if __name__ == "__main__":
    asyncio.run(main())
