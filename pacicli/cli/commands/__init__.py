"""Command modules, one per API resource area, and the options they share."""

import typer

from pacicli.errors import InvalidTimestampError
from pacicli.values import ARG_TIMESTAMP_HELP, Timestamp

FROM_OPTION = typer.Option(
    "", "--from", "-f", help=f"Start date and time in {ARG_TIMESTAMP_HELP} format"
)
TO_OPTION = typer.Option(
    "", "--to", "-t", help=f"End date and time in {ARG_TIMESTAMP_HELP} format"
)
NUM_RECORDS_OPTION = typer.Option(
    10, "--num-records", "-n", help="Number of records the API should return"
)
VERBOSE_OPTION = typer.Option(
    False, "--verbose", "-v", help="Print the full record instead of a table"
)
NO_HEADER_OPTION = typer.Option(
    False, "--no-header", "-H", help="Don't output column header"
)
SETTING_FILE_OPTION = typer.Option(
    "", "--setting-file", "-s", help="File containing the setting (JSON or TOML)"
)
SUBSCRIPTION_OPTION = typer.Option(
    0, "--subscription-id", "-s", help="Subscription ID number"
)


def parse_period(from_text: str, to_text: str) -> tuple[Timestamp, Timestamp]:
    """Validate a --from/--to pair before it is put into a request path.

    Raises:
        InvalidTimestampError: If either value is not a timestamp
    """
    period = []
    for flag, text in (("from", from_text), ("to", to_text)):
        try:
            period.append(Timestamp.parse_argument(text))
        except InvalidTimestampError as e:
            raise InvalidTimestampError(
                message=f"'{flag}' arg value must be in {ARG_TIMESTAMP_HELP} format",
                error_code=e.error_code,
                details={"flag": flag, "text": text},
            ) from e
    return period[0], period[1]
