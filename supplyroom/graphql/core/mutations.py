import logging

import graphene
from django.core.exceptions import ImproperlyConfigured
from graphene.types.mutation import MutationOptions

from ...core.context import RequestContext
from ...core.exceptions import (
    BusinessRuleViolationError,
    DomainError,
    ForbiddenError,
    InvalidStateError,
    NotFoundError,
    ValidationError,
)
from . import ResolveInfo
from .types import NonNullList
from .utils import get_request_context

logger = logging.getLogger(__name__)

# Checked in order; the first matching class decides the error code.
DEFAULT_ERROR_CODES = (
    (NotFoundError, "NOT_FOUND"),
    (ForbiddenError, "FORBIDDEN"),
    (InvalidStateError, "INVALID_STATE"),
    (BusinessRuleViolationError, "BUSINESS_RULE"),
    (ValidationError, "INVALID"),
)


class BaseMutationOptions(MutationOptions):
    error_type_class = None
    error_type_field = None
    exception_codes = None


class BaseMutation(graphene.Mutation):
    """Base class of every supplyroom mutation.

    Subclasses implement ``perform_mutation``. Any ``DomainError`` it raises
    is returned as a ``{field, code, message}`` entry of ``errors``; other
    exceptions propagate as GraphQL errors.
    """

    class Meta:
        abstract = True

    @classmethod
    def __init_subclass_with_meta__(
        cls,
        description=None,
        error_type_class=None,
        error_type_field=None,
        exception_codes=None,
        _meta=None,
        **options,
    ):
        if not _meta:
            _meta = BaseMutationOptions(cls)

        if not description:
            raise ImproperlyConfigured("No description provided in Meta")

        if not error_type_class:
            raise ImproperlyConfigured("No error_type_class provided in Meta.")

        _meta.error_type_class = error_type_class
        _meta.error_type_field = error_type_field
        _meta.exception_codes = exception_codes or {}
        super().__init_subclass_with_meta__(
            description=description, _meta=_meta, **options
        )

        error_field = graphene.Field(
            NonNullList(error_type_class),
            required=True,
            description="List of errors that occurred executing the mutation.",
        )
        fields = {"errors": error_field}
        if error_type_field:
            fields[error_type_field] = error_field
        cls._meta.fields.update(fields)

    @classmethod
    def get_error_code(cls, error: DomainError) -> str:
        for exception_class, code in cls._meta.exception_codes.items():
            if isinstance(error, exception_class):
                return code
        for exception_class, code in DEFAULT_ERROR_CODES:
            if isinstance(error, exception_class):
                return code
        return "INVALID"

    @classmethod
    def handle_errors(cls, error: DomainError, **extra):
        typed_errors = [
            cls._meta.error_type_class(
                field=error.field,
                message=error.message,
                code=cls.get_error_code(error),
            )
        ]
        extra["errors"] = typed_errors
        if cls._meta.error_type_field:
            extra[cls._meta.error_type_field] = typed_errors
        return cls(**extra)

    @classmethod
    def mutate(cls, root, info: ResolveInfo, /, **data):
        context = get_request_context(info)
        try:
            response = cls.perform_mutation(root, info, context, **data)
        except DomainError as error:
            logger.info(
                "%s rejected: %s (%s)", cls.__name__, error.message, error.code
            )
            return cls.handle_errors(error)

        if response.errors is None:
            response.errors = []
        if cls._meta.error_type_field and getattr(
            response, cls._meta.error_type_field, None
        ) is None:
            setattr(response, cls._meta.error_type_field, [])
        return response

    @classmethod
    def perform_mutation(
        cls, root, info: ResolveInfo, context: RequestContext | None, /, **data
    ):
        pass
