from datetime import datetime
from typing import Annotated

from pydantic import AfterValidator

from mynetwrk.models.base import utc_naive

# Incoming timestamps may carry any offset; everything is stored as naive UTC.
UtcDateTime = Annotated[datetime, AfterValidator(utc_naive)]
