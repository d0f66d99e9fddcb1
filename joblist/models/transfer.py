import enum

# Wire value of ExpectedTransferStatus meaning "no filter"
NO_STATUS_FILTER = 255


class TransferStatus(enum.IntEnum):
    IN_PROGRESS = 0
    COMPLETE = 1
    FAILED = 2
    ANY = 3

    @property
    def label(self) -> str:
        return _LABELS[self]

    @classmethod
    def from_name(cls, name: str) -> "TransferStatus":
        """Look up a status by its engine name, ignoring case."""
        try:
            return _BY_NAME[name.strip().lower()]
        except KeyError:
            raise ValueError(
                f"unknown transfer status, expected one of {', '.join(STATUS_NAMES)}"
            ) from None


_LABELS = {
    TransferStatus.IN_PROGRESS: "TransferInProgress",
    TransferStatus.COMPLETE: "TransferComplete",
    TransferStatus.FAILED: "TransferFailed",
    TransferStatus.ANY: "TransferAny",
}

STATUS_NAMES = tuple(_LABELS.values())

_BY_NAME = {label.lower(): status for status, label in _LABELS.items()}


def status_label(code: int | str) -> str:
    """Render a status code from a response; unknown codes are shown as-is."""
    if isinstance(code, str):
        return code
    try:
        return TransferStatus(code).label
    except ValueError:
        return str(code)
