from __future__ import annotations

import logging
import warnings
from pathlib import Path

import pandas as pd

from ..errors import CsvFormatError

"""CSV reader for recipient lists.

The first line is the header row, every following line is one record. All
cells are read as strings exactly as they appear in the file: no NA
conversion, no whitespace trimming, no numeric coercion (leading zeros in
phone numbers must survive).
"""

__all__ = [
    "CsvFormatError",
    "read_csv_rows",
]

logger = logging.getLogger(__name__)
def read_csv_rows(path: Path | str) -> list[dict[str, str]]:
    """Read a CSV file into a list of header -> value rows in file order.

    Header cells are named by pandas: duplicates become ``a``, ``a.1`` and an
    empty header cell becomes ``Unnamed: <position>``.

    Raises:
        OSError: the path cannot be opened (propagated unchanged)
        CsvFormatError: the content is not header + comma separated rows
    """
    try:
        with warnings.catch_warnings():
            # with index_col=False, extra fields on every row only warn
            warnings.simplefilter("error", pd.errors.ParserWarning)
            df = pd.read_csv(
                path,
                sep=",",
                header=0,
                index_col=False,
                dtype=str,
                keep_default_na=False,
                na_filter=False,
                skip_blank_lines=True,
            )
    except pd.errors.EmptyDataError as e:
        logger.error(f"Failed {e}")
        raise CsvFormatError(f"{path}: no header row") from e
    except (pd.errors.ParserError, pd.errors.ParserWarning) as e:
        logger.error(f"Failed {e}")
        raise CsvFormatError(f"{path}: {e}") from e
    except UnicodeDecodeError as e:
        logger.error(f"Failed {e}")
        raise CsvFormatError(f"{path}: not valid UTF-8 text") from e

    # rows shorter than the header are padded with NaN even with na_filter off
    df = df.fillna("")
    rows: list[dict[str, str]] = [
        {str(col): str(val) for col, val in record.items()} for record in df.to_dict(orient="records")
    ]
    logger.info(f"Parsed {len(rows)} rows")
    return rows
