"""
Document-level load failures.

Row-level problems never show up here; bad rows are skipped during
extraction. Each error carries a message that can be shown to the user as is.
"""


class SheetLoadError(Exception):
    """Base class for failures that abort a whole load."""

    user_message = "Fehler beim Laden des Google Sheets."

    def __init__(self, detail=None):
        super().__init__(detail or self.user_message)
        self.detail = detail


class TransportError(SheetLoadError):
    """The document could not be retrieved (network error, bad status)."""

    user_message = (
        "Fehler beim Laden des Google Sheets. Bitte prüfen, ob das Sheet "
        "öffentlich ist und der Blattname korrekt ist."
    )


class EmptyDocumentError(SheetLoadError):
    """The retrieved document is empty."""

    user_message = "Das Sheet ist leer."


class MalformedDocumentError(SheetLoadError):
    """The gviz payload could not be decoded."""

    user_message = "Die Antwort des Sheets konnte nicht gelesen werden."


class NoExtractableDataError(SheetLoadError):
    """The document was readable but held no valid sets."""

    user_message = (
        "Im Sheet wurden keine gültigen Sätze gefunden. Bitte Layout und "
        "Spaltenzuordnung prüfen."
    )
