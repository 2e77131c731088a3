"""Dataset validation: presence and file extension."""

from collections.abc import Mapping
from pathlib import PurePath

from toolspec.logging import get_logger
from toolspec.models import ToolSpec
from toolspec.validate.errors import ErrorKind, Field, ValidationError, format_choices

logger = get_logger(__name__)

__all__ = ["validate_data", "path_extension"]


def path_extension(path: str) -> str:
    """Return the lowercase final suffix of a path, or "" if it has none.

    Examples:
        >>> path_extension("/in/Matrix.CSV")
        '.csv'
        >>> path_extension("/in/README")
        ''
    """
    return PurePath(path).suffix.lower()


def _has_extension(path: str, extensions: tuple[str, ...]) -> bool:
    # endswith so multi-part extensions such as ".tar.gz" can match
    lowered = path.lower()
    return any(lowered.endswith(ext) for ext in extensions)


def validate_data(
    spec: ToolSpec,
    datasets: Mapping[str, str],
) -> tuple[bool, list[ValidationError]]:
    """Validate dataset paths against the tool's data specs.

    Every declared dataset must be present. When a dataset declares
    extensions, its path must end with one of them (case-insensitive).
    Datasets the tool does not declare are ignored.

    Args:
        spec: Tool spec holding the declared datasets
        datasets: Dataset name to file path

    Returns:
        Tuple of (has_errors, errors) with errors sorted by name and kind
    """
    errors: list[ValidationError] = []

    for name, data_spec in spec.data.items():
        if name not in datasets:
            errors.append(
                ValidationError(
                    field=Field.DATA,
                    name=name,
                    kind=ErrorKind.REQUIRED,
                    expected="not null",
                    actual="null",
                    message=f"{name} is a required data entry but was not provided",
                )
            )
            continue

        if data_spec.extensions:
            path = datasets[name]
            if not _has_extension(path, data_spec.extensions):
                allowed = format_choices(data_spec.extensions)
                errors.append(
                    ValidationError(
                        field=Field.DATA,
                        name=name,
                        kind=ErrorKind.WRONG_TYPE,
                        expected=f"one of {allowed}",
                        actual=path_extension(path),
                        message=(
                            f"data file {name} has an invalid extension, "
                            f"expected one of {allowed}"
                        ),
                    )
                )

    errors.sort(key=ValidationError.sort_key)
    logger.debug(
        "validation.data.completed",
        tool=spec.name,
        checked=len(datasets),
        error_count=len(errors),
    )
    return bool(errors), errors
