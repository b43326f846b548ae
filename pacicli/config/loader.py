"""
Configuration loader for JSON and TOML setting files.

The format is taken from the file extension when it names one, otherwise
it is sniffed from the content. The decoded mapping is validated against
a caller-supplied pydantic model.
"""

from pathlib import Path
from typing import TypeVar, Union

from pydantic import BaseModel, ValidationError

from pacicli.config.decoders import DECODERS_BY_EXTENSION, Decoder, sniff_decoder
from pacicli.errors import ConfigurationDecodeError, ConfigurationFileError
from pacicli.logging import get_logger, log_entry_exit

T = TypeVar("T", bound=BaseModel)

logger = get_logger(__name__)


def select_decoder(path: Path, data: bytes) -> Decoder:
    decoder = DECODERS_BY_EXTENSION.get(path.suffix.lower())
    if decoder is None:
        decoder = sniff_decoder(data)
    return decoder


@log_entry_exit(logger=logger)
def load_config(config_path: Union[str, Path], model_type: type[T]) -> T:
    """
    Load a setting file and validate it against a pydantic model.

    Args:
        config_path: Path to a JSON or TOML file
        model_type: Pydantic model class to decode into

    Returns:
        A model_type instance; an empty file yields the model's defaults

    Raises:
        ConfigurationFileError: If the file cannot be read
        ConfigurationDecodeError: If the content does not decode or does
            not fit model_type
    """
    path = Path(config_path)
    try:
        data = path.read_bytes()
    except OSError as e:
        raise ConfigurationFileError(
            message=f"Cannot read configuration file {path}: {e.strerror or e}",
            error_code="CONF-FileNotReadable",
            details={"path": str(path)},
        ) from e

    decoded: dict = {}
    if not data.strip():
        logger.debug(f"Empty configuration file: {path}")
    else:
        decoder = select_decoder(path, data)
        logger.debug(f"Decoding {path} as {decoder.name}")
        try:
            decoded = decoder.decode(data)
        except ConfigurationDecodeError as e:
            e.details["path"] = str(path)
            raise

    try:
        return model_type.model_validate(decoded)
    except ValidationError as e:
        raise ConfigurationDecodeError(
            message=f"Configuration validation failed for {path}: {e}",
            error_code="CONF-ValidationFailed",
            details={
                "path": str(path),
                "validation_errors": e.errors(include_url=False),
            },
        ) from e
