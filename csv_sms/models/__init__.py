"""Domain models for the CSV -> SMS sender.

Row values themselves stay plain ``dict[str, str]``; the classes here describe
configuration, column selection and send results.
"""

from .config_models import Credentials, SendRequest, SendSettings, StripMode
from .processing_result import DispatchResult, PipelineResult
from .selector import ByIndex, ByName, ColumnSelector
from .send_outcome import SendOutcome, SendStatus

__all__ = [
    # Configuration models
    "Credentials",
    "SendRequest",
    "SendSettings",
    "StripMode",
    # Column selection
    "ByIndex",
    "ByName",
    "ColumnSelector",
    # Results
    "DispatchResult",
    "PipelineResult",
    "SendOutcome",
    "SendStatus",
]
