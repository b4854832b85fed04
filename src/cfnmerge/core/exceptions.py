from __future__ import annotations

from typing import Any, Dict, Mapping


class CfnMergeError(Exception):
    """Base exception for template merging."""

    context: Dict[str, Any]

    def __init__(self, message: str = "", *, context: Mapping[str, Any] | None = None) -> None:
        super().__init__(message)
        self.context = dict(context or {})

    def to_json_error(self) -> Dict[str, Any]:
        """Return a JSON-serializable error payload."""
        return {
            "message": str(self),
            "code": self.__class__.__name__,
            "context": self.context,
        }


class InvalidArgumentError(CfnMergeError, ValueError):
    """Raised when a caller passes an empty or blank template path."""

    def __init__(self, message: str = "", *, context: Mapping[str, Any] | None = None) -> None:
        CfnMergeError.__init__(self, message, context=context)
        ValueError.__init__(self, message)


class TemplateNotFoundError(CfnMergeError, FileNotFoundError):
    """Raised when the root template or an imported template is missing."""

    def __init__(
        self,
        message: str,
        *,
        path: str | None = None,
        resource: str | None = None,
        context: Mapping[str, Any] | None = None,
    ) -> None:
        ctx = dict(context or {})
        if path:
            ctx["path"] = path
        if resource:
            ctx["resource"] = resource
        CfnMergeError.__init__(self, message, context=ctx)
        FileNotFoundError.__init__(self, message)


class SectionNotFoundError(CfnMergeError, LookupError):
    """Raised when a template does not contain the requested section."""

    def __init__(
        self,
        message: str,
        *,
        section: str,
        path: str | None = None,
        context: Mapping[str, Any] | None = None,
    ) -> None:
        ctx = dict(context or {})
        ctx["section"] = section
        if path:
            ctx["path"] = path
        CfnMergeError.__init__(self, message, context=ctx)
        LookupError.__init__(self, message)


class MalformedReferenceError(CfnMergeError, ValueError):
    """Raised when an import resource is neither a path nor ``path#Section``."""

    def __init__(
        self,
        message: str,
        *,
        resource: str,
        path: str | None = None,
        context: Mapping[str, Any] | None = None,
    ) -> None:
        ctx = dict(context or {})
        ctx["resource"] = resource
        if path:
            ctx["path"] = path
        CfnMergeError.__init__(self, message, context=ctx)
        ValueError.__init__(self, message)


class TemplateReadError(CfnMergeError, ValueError):
    """Raised when a template cannot be decoded with the configured encoding."""

    def __init__(
        self,
        message: str,
        *,
        path: str,
        encoding: str | None = None,
        context: Mapping[str, Any] | None = None,
    ) -> None:
        ctx = dict(context or {})
        ctx["path"] = path
        if encoding:
            ctx["encoding"] = encoding
        CfnMergeError.__init__(self, message, context=ctx)
        ValueError.__init__(self, message)


class ConfigError(CfnMergeError):
    """Raised when configuration cannot be loaded or fails validation."""


__all__ = [
    "CfnMergeError",
    "InvalidArgumentError",
    "TemplateNotFoundError",
    "SectionNotFoundError",
    "MalformedReferenceError",
    "TemplateReadError",
    "ConfigError",
]
