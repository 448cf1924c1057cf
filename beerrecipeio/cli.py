import argparse
import asyncio
import dataclasses
import json
import sys

from beerrecipeio.decoder import RecipeDecoder
from beerrecipeio.formats import BeerXmlParser
from beerrecipeio.outcome import DecodeOutcome


def _is_url(source: str) -> bool:
    return source.startswith(("http://", "https://"))


def _summary(recipe) -> str:
    style = recipe.style.name if recipe.style else "-"
    batch = f"{recipe.batch_size_l:g} L" if recipe.batch_size_l is not None else "-"
    return f"{recipe.name}\t{style}\t{batch}"


def decode_source(decoder: RecipeDecoder, source: str, use_async: bool = False) -> DecodeOutcome:
    if source == "-":
        return decoder.decode(sys.stdin.buffer.read())
    if _is_url(source):
        if use_async:
            return asyncio.run(decoder.decode_url(source))
        return decoder.decode_url_sync(source)
    with open(source, "rb") as f:
        return decoder.decode(f.read())


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Decode BeerXML recipes from a URL, a file or stdin.")
    parser.add_argument("source", help="http(s) URL, file path, or '-' for stdin.")
    parser.add_argument("--async", dest="use_async", action="store_true", help="Fetch URLs with the async transport.")
    parser.add_argument("--json", dest="as_json", action="store_true", help="Print the recipes as a JSON array.")
    args = parser.parse_args(argv)

    decoder = RecipeDecoder(BeerXmlParser())
    try:
        outcome = decode_source(decoder, args.source, use_async=args.use_async)
    except OSError as exc:
        print(f"error: cannot read {args.source}: {exc}", file=sys.stderr)
        return 1

    if not outcome.ok:
        print(f"{outcome.kind} error: {outcome.error}", file=sys.stderr)
        return 1

    if args.as_json:
        print(json.dumps([dataclasses.asdict(r) for r in outcome.records], indent=2))
    else:
        for recipe in outcome.records:
            print(_summary(recipe))
    return 0


if __name__ == "__main__":
    sys.exit(main())
