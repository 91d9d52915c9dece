import csv
import io
import math
import sys
import logging
from typing import Iterable, List, Optional, TextIO

from .state_data import StateRecord

logger = logging.getLogger(__name__)

OUTPUT_FORMATS = ('csv', 'averages')
CSV_HEADER = ['name', 'fips', 'population', 'households', 'median_income']
FORMAT_DIAGNOSTIC = f"must specify --format as one of: {', '.join(OUTPUT_FORMATS)}"
NO_DATA = 'no data'


def weighted_average(records: Iterable[StateRecord]) -> Optional[float]:
    """Households-weighted mean of median income.

    Returns None when there are no records or the households add up to zero.
    """
    records = list(records)
    total_households = sum(record.households for record in records)

    if total_households == 0:
        return None
    return math.fsum(record.median_income * record.households for record in records) / total_households


def render_csv(records: List[StateRecord]) -> str:
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator='\n')
    writer.writerow(CSV_HEADER)
    for record in records:
        writer.writerow([
            record.name,
            record.fips_code,
            record.population,
            record.households,
            record.median_income
        ])
    return buffer.getvalue()


def render_averages(records: List[StateRecord]) -> str:
    average = weighted_average(records)
    if average is None:
        logger.warning("No households to weight; cannot compute an average")
        return NO_DATA + '\n'
    return f"{average}\n"


def write_report(records: List[StateRecord], output_format: Optional[str],
                 out: Optional[TextIO] = None, err: Optional[TextIO] = None) -> bool:
    """Write the records in the chosen format. Returns False for an unknown format."""
    out = out or sys.stdout
    err = err or sys.stderr

    if output_format == 'csv':
        out.write(render_csv(records))
    elif output_format == 'averages':
        out.write(render_averages(records))
    else:
        logger.debug(f"Unsupported output format: {output_format!r}")
        err.write(FORMAT_DIAGNOSTIC + '\n')
        return False
    return True
