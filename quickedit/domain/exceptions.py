"""Domain-specific exceptions — framework-independent."""


class EntityNotFoundError(Exception):
    """Raised when a requested entity does not exist."""

    def __init__(self, entity_type: str, entity_id: int | str):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(f"{entity_type} with id '{entity_id}' not found")


class QuickEditError(Exception):
    """Base class for every quick edit failure.

    All of them are client errors; ``code`` is a short stable identifier
    kept for logging and for wrapping, it is not sent to the client.
    """

    code = "quick_edit_error"


class AmbiguousEntityNameError(QuickEditError):
    """Raised when a short name matches more than one registered type."""

    code = "ambiguous_entity_name"

    def __init__(self, name: str, first: str, second: str):
        self.name = name
        self.candidates = (first, second)
        super().__init__(
            f'The name "{name}" is not unambiguous. '
            f'Entity "{first}" and "{second}" correspond to this name.'
        )


class UnknownEntityTypeError(QuickEditError):
    """Raised when a name does not resolve to any registered type."""

    code = "unknown_entity_type"

    def __init__(self, name: str):
        self.name = name
        super().__init__(f'No entity corresponds to name "{name}".')


class RecordNotFoundError(QuickEditError):
    code = "record_not_found"

    def __init__(self, entity_type: str, identifier: str):
        self.entity_type = entity_type
        self.identifier = identifier
        super().__init__(
            f'Entity "{entity_type}" with identifier "{identifier}" does not exist.'
        )


class NonUniqueRecordError(QuickEditError):
    """Raised when the backing store holds several rows for one identifier."""

    code = "non_unique_record"

    def __init__(self, entity_type: str, identifier: str):
        self.entity_type = entity_type
        self.identifier = identifier
        super().__init__(
            f'Entity "{entity_type}" with identifier "{identifier}" is not unique.'
        )


class SetterMissingError(QuickEditError):
    code = "setter_missing"

    def __init__(self, setter: str):
        self.setter = setter
        super().__init__(f'Setter "{setter}" does not exist.')


class NotEditableError(QuickEditError):
    code = "not_editable"

    def __init__(self, setter: str):
        self.setter = setter
        super().__init__(f'Method "{setter}" is not marked as editable.')


class ArityMismatchError(QuickEditError):
    code = "arity_mismatch"

    def __init__(self, setter: str, arity: int):
        self.setter = setter
        self.arity = arity
        if arity == 0:
            message = f'First input argument for method "{setter}" is required.'
        else:
            message = (
                f'Method "{setter}" implements too many arguments. '
                "Did you use one argument only?"
            )
        super().__init__(message)


class ApplyFailedError(QuickEditError):
    """Wraps any failure raised while validating, coercing or invoking a setter.

    The inner error's ``code`` is kept; raise it ``from`` the inner error so
    the cause chain is preserved.
    """

    code = "apply_failed"

    def __init__(self, entity_type: str, identifier: str, inner: Exception):
        self.entity_type = entity_type
        self.identifier = identifier
        self.code = getattr(inner, "code", ApplyFailedError.code)
        super().__init__(
            f'Value for entity "{entity_type}" with identifier "{identifier}" '
            f"can not be changed: {inner}"
        )
