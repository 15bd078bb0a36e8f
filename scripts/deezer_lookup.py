#!/usr/bin/env python3
"""CLI script to look up Deezer entities, connections and search results as JSON."""

from __future__ import annotations

import argparse
import asyncio
import json
import sys
from typing import Any

from adapters.config import load_env
from api.deezer.client import DeezerClient
from api.deezer.errors import DeezerError
from api.deezer.models import (
    Album,
    Artist,
    Comment,
    Editorial,
    Genre,
    Playlist,
    Radio,
    SearchedAlbum,
    SearchedArtist,
    SearchedPlaylist,
    SearchedRadio,
    SearchedTrack,
    SearchedUser,
    Track,
    User,
)
from api.deezer.resources import ALTERNATE_KEY_PREFIXES, AlternateKey, Identifier, NumericId
from api.deezer.search import SearchOrder

ENTITY_KINDS = {
    "album": Album,
    "artist": Artist,
    "comment": Comment,
    "editorial": Editorial,
    "genre": Genre,
    "playlist": Playlist,
    "radio": Radio,
    "track": Track,
    "user": User,
}

LIST_KINDS = {"editorial": Editorial, "genre": Genre, "radio": Radio}

CONNECTABLE_KINDS = {
    "album": Album,
    "artist": Artist,
    "genre": Genre,
    "playlist": Playlist,
    "radio": Radio,
    "user": User,
}

SEARCH_KINDS = {
    "album": SearchedAlbum,
    "artist": SearchedArtist,
    "playlist": SearchedPlaylist,
    "radio": SearchedRadio,
    "track": SearchedTrack,
    "user": SearchedUser,
}


def parse_identifier(value: str) -> Identifier:
    """Parse ``302127`` or ``upc:724384960650`` into an identifier."""
    prefix, sep, rest = value.partition(":")
    if sep and prefix in ALTERNATE_KEY_PREFIXES:
        return AlternateKey(prefix, rest)
    try:
        return NumericId(int(value))
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"invalid Deezer identifier: {value!r}") from e


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Query the public Deezer API.")
    parser.add_argument("--indent", type=int, default=2, help="JSON indent (default: 2).")
    subparsers = parser.add_subparsers(dest="command", required=True)

    get = subparsers.add_parser("get", help="Fetch one entity by id or alternate key.")
    get.add_argument("kind", choices=sorted(ENTITY_KINDS))
    get.add_argument("identifier", type=parse_identifier, help="Numeric id, upc:<code> or isrc:<code>.")

    listing = subparsers.add_parser("list", help="List every genre, radio or editorial.")
    listing.add_argument("kind", choices=sorted(LIST_KINDS))

    conn = subparsers.add_parser("connection", help="Fetch a relationship collection.")
    conn.add_argument("kind", choices=sorted(CONNECTABLE_KINDS))
    conn.add_argument("identifier", type=parse_identifier)
    conn.add_argument("relationship", help="e.g. fans, comments, tracks, top.")
    conn.add_argument("--limit", type=int, default=None)
    conn.add_argument("--offset", type=int, default=None)

    search = subparsers.add_parser("search", help="Keyword search.")
    search.add_argument("kind", choices=sorted(SEARCH_KINDS))
    search.add_argument("query")
    search.add_argument("--strict", action="store_true", help="Exact matches only.")
    search.add_argument(
        "--order",
        type=SearchOrder,
        choices=list(SearchOrder),
        default=SearchOrder.RANKING,
    )

    subparsers.add_parser("info", help="API information for the caller's country.")

    chart = subparsers.add_parser("chart", help="Top charts.")
    chart.add_argument("--genre", type=int, default=None, help="Genre id (default: all).")
    return parser


def _to_serializable(payload: Any) -> Any:
    if payload is None:
        return None
    if isinstance(payload, list):
        return [_to_serializable(item) for item in payload]
    return payload.model_dump(mode="json")


async def run(args: argparse.Namespace, client: DeezerClient) -> Any:
    """Execute the parsed command and return the decoded result."""
    if args.command == "get":
        return await client.fetch_by_id(ENTITY_KINDS[args.kind], args.identifier)
    if args.command == "list":
        return await client.fetch_all(LIST_KINDS[args.kind])
    if args.command == "connection":
        owner = CONNECTABLE_KINDS[args.kind]
        child = owner.connections().get(args.relationship)
        if child is None:
            available = ", ".join(sorted(owner.connections()))
            raise ValueError(f"{args.kind} has no {args.relationship!r} connection ({available})")
        return await client.fetch_connection(owner, child, args.identifier, args.limit, args.offset)
    if args.command == "search":
        search = client.search(SEARCH_KINDS[args.kind], args.query, strict=args.strict)
        return await search.order(args.order).send()
    if args.command == "info":
        return await client.api_info()
    if args.command == "chart":
        return await client.charts(args.genre)
    raise ValueError(f"Unknown command {args.command!r}")


async def main(argv: list[str] | None = None) -> int:
    load_env()
    args = build_parser().parse_args(argv)

    async with DeezerClient() as client:
        try:
            result = await run(args, client)
        except (DeezerError, ValueError) as e:
            print(f"Error: {e}", file=sys.stderr)
            return 2

    if result is None:
        print(f"No {args.kind} found for {args.identifier}", file=sys.stderr)
        return 1

    print(json.dumps(_to_serializable(result), indent=args.indent, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
