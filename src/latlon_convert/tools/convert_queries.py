import argparse
import csv
import logging
import sys
from typing import List, Tuple

from latlon_convert.convert_latlon import convert_many
from latlon_convert.models import ConversionResult
from latlon_convert.util import read_column

log = logging.getLogger(__name__)

QUERY_FIELD = "query"
OUTPUT_FIELDS = ["query", "source_form", "input", "output"]


def read_queries(path: str) -> List[str]:
    with open(path, "r", newline="", encoding="utf-8") as queries_file:
        queries = read_column(queries_file, QUERY_FIELD)
    log.info(f"Read {len(queries)} queries from {path}")
    return queries


def write_conversions(
    conversions: List[Tuple[str, ConversionResult | None]], out_file_path: str
) -> None:
    with open(out_file_path, "w", newline="", encoding="utf-8") as out_file:
        writer = csv.DictWriter(out_file, fieldnames=OUTPUT_FIELDS)
        writer.writeheader()
        for query, result in conversions:
            writer.writerow(
                {
                    "query": query,
                    "source_form": result.source_form.value if result else "",
                    "input": result.formatted_input if result else "",
                    "output": result.formatted_output if result else "",
                }
            )
    log.info(f"Wrote {len(conversions)} conversions to {out_file_path}")


def convert_queries(
    queries: List[str], csv_file_path: str | None, out_file_path: str | None
) -> int:
    if csv_file_path:
        queries = queries + read_queries(csv_file_path)
    conversions = list(convert_many(queries))
    converted = 0
    for query, result in conversions:
        if result is None:
            log.warning(f'no conversion for "{query}"')
            continue
        converted += 1
        if not out_file_path:
            print(result.describe())
    if out_file_path:
        write_conversions(conversions, out_file_path)
    log.info(f"Converted {converted} of {len(conversions)} queries")
    return converted


def entrypoint():
    parser = argparse.ArgumentParser(
        description="Convert latitudes and longitudes between degrees-minutes-seconds and decimal degrees"
    )
    parser.add_argument(
        "queries", nargs="*", help="Free-text queries such as 71° 10' 3\" N"
    )
    parser.add_argument(
        "--csv",
        help="Path to a CSV file with a 'query' column; lines starting with '#' are skipped",
    )
    parser.add_argument(
        "--out",
        help="Path where to write a CSV file with the conversions instead of printing them",
    )
    parser.add_argument(
        "--verbose", action="store_true", help="Log why queries were declined"
    )
    args = parser.parse_args()
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)
    if not args.queries and not args.csv:
        parser.error("no queries given")
    converted = convert_queries(args.queries, args.csv, args.out)
    if not converted:
        sys.exit(1)


if __name__ == "__main__":
    entrypoint()
