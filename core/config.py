"""Invoice configuration."""

import logging
import os
from decimal import Decimal
from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel, Field

from utils.timezone import DEFAULT_TIMEZONE

logger = logging.getLogger(__name__)

_ENV_PREFIX = "INVOICE_"


class InvoiceConfig(BaseModel):
    """
    Defaults applied when an invoice record leaves a field unset.

    Rates are percentages (11 = 11%) to match how PPN is written on
    Indonesian invoices.
    """

    # Tax
    default_ppn_rate: Decimal = Field(
        default=Decimal("11"),
        description="PPN rate used when an invoice has no ppn_rate",
        ge=0,
        le=100,
    )

    # Presentation
    show_terbilang: bool = Field(
        default=True,
        description="Whether summaries include the total spelled out in words",
    )
    include_decimals: bool = Field(
        default=False,
        description="Whether the displayed total shows sen (Rp 1.000,00)",
    )
    date_format: str = Field(
        default="long",
        description="Date style for summaries",
        pattern="^(long|medium|short)$",
    )
    timezone: str = Field(
        default=DEFAULT_TIMEZONE,
        description="IANA timezone used to date aware datetimes",
    )

    model_config = {"frozen": True}

    @classmethod
    def from_env(cls, env_file: str | Path | None = None) -> "InvoiceConfig":
        """
        Build config from INVOICE_* environment variables.

        Unset variables keep their defaults. If env_file is given it is
        loaded first without overriding variables already set.

        Example:
            INVOICE_DEFAULT_PPN_RATE=12
            INVOICE_SHOW_TERBILANG=false

        Raises:
            pydantic.ValidationError: A variable is out of bounds or malformed
        """
        if env_file is not None:
            load_dotenv(env_file, override=False)

        values = {}
        for name in cls.model_fields:
            raw = os.getenv(f"{_ENV_PREFIX}{name.upper()}")
            if raw is not None:
                values[name] = raw.strip()

        config = cls.model_validate(values)
        logger.info(
            f"Invoice config loaded: ppn_rate={config.default_ppn_rate} "
            f"timezone={config.timezone}"
        )
        return config
