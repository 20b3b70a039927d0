"""Hard failures raised at the import filter boundary."""


class NativeImportError(Exception):
    """Base class for errors that abort a native XML import."""


class XmlParseError(NativeImportError):
    """Raised when the document is not well-formed XML."""

    def __init__(self, detail: str):
        self.detail = detail
        super().__init__(f"Unable to parse native XML document: {detail}")


class UnexpectedRootElementError(NativeImportError):
    """Raised when the document root is neither the plural nor singular element."""

    def __init__(self, tag: str, expected: tuple[str, ...]):
        self.tag = tag
        self.expected = expected
        super().__init__(
            f"Unexpected root element <{tag}>, expected one of: "
            + ", ".join(f"<{name}>" for name in expected)
        )


class SubmissionNotFoundError(NativeImportError):
    """Raised when authors are imported into a submission that does not exist."""

    def __init__(self, submission_id: int):
        self.submission_id = submission_id
        super().__init__(f"Submission {submission_id} not found")
