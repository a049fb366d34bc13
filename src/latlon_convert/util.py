import csv
import logging
from typing import IO, Iterator, List


log = logging.getLogger(__name__)


__all__ = ["get_csv_reader", "read_column"]


def _skip_comments(fp: IO[str]) -> Iterator[str]:
    for line_number, line in enumerate(fp, start=1):
        if line.startswith("#"):
            log.info(f'skipping comment on line {line_number}: "{line.strip()}"')
        else:
            yield line


def get_csv_reader(file: IO[str]) -> csv.DictReader:
    return csv.DictReader(_skip_comments(file))


def read_column(file: IO[str], field: str) -> List[str]:
    """Read one column of a CSV file, skipping rows that have no value for it.

    Lines starting with "#" are comments and never reach the CSV parser.
    Raises RuntimeError when the header has no such column.
    """
    reader = get_csv_reader(file)
    if not reader.fieldnames or field not in reader.fieldnames:
        raise RuntimeError(f'no "{field}" column found, header is {reader.fieldnames}')
    values = []
    for row in reader:
        value = row[field]
        if value is None:
            log.warning(f'skipping row {reader.line_num} without a "{field}" value')
            continue
        log.debug(f'read {field} "{value}" from row {reader.line_num}')
        values.append(value)
    return values
