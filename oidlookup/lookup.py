"""High-level orchestration of the lookup commands."""

from __future__ import annotations

import logging
from typing import Optional

from .buffers import ResultBufferManager
from .configuration import OidLookupConfig
from .errors import EmptyInputError
from .extraction import extract_oid, normalize_oid
from .host import BufferHost, EditorContext
from .inference import infer_request
from .invoker import TranslatorRunner, build_invocation, build_runner
from .structures import (
    ByLabel,
    ByOid,
    LookupMode,
    ResultBuffer,
    TranslationRequest,
    TranslationResult,
)

logger = logging.getLogger(__name__)


class OidLookup:
    """Coordinates extraction, translation and presentation."""

    def __init__(
        self,
        *,
        settings: OidLookupConfig,
        context: EditorContext,
        host: BufferHost,
        runner: Optional[TranslatorRunner] = None,
    ) -> None:
        self.settings = settings
        self.context = context
        self.buffers = ResultBufferManager(host, settings)
        self.runner = runner or build_runner(settings)

    def translate_by_oid(self, oid: Optional[str] = None) -> ResultBuffer:
        return self.dispatch(ByOid(oid))

    def translate_by_label(self, label: Optional[str] = None) -> ResultBuffer:
        return self.dispatch(ByLabel(label))

    def translate_infer(self) -> ResultBuffer:
        request = infer_request(
            self.context.current_line(),
            self.context.cursor_index(),
        )
        logger.debug("Inferred %r from cursor context", request)
        return self.dispatch(request)

    def list_all_oids(self) -> ResultBuffer:
        spec = build_invocation(LookupMode.LIST_ALL, None, self.settings)
        result = self.runner.run(spec)
        return self.buffers.present(result.command_line, result.output_lines)

    def dispatch(self, request: TranslationRequest) -> ResultBuffer:
        """Run ``request`` and show the output in the result buffer.

        Raises :class:`EmptyInputError` before anything is run when no
        payload can be resolved; the buffer is left as it was.
        """

        result = self.invoke(request)
        return self.buffers.present(result.command_line, result.output_lines)

    def invoke(self, request: TranslationRequest) -> TranslationResult:
        if isinstance(request, ByOid):
            mode = LookupMode.OID
            payload = normalize_oid(self.resolve_oid(request.oid))
            kind = "OID"
        else:
            mode = LookupMode.LABEL
            payload = self.resolve_label(request.label)
            kind = "label"

        if not payload:
            raise EmptyInputError(kind)

        spec = build_invocation(mode, payload, self.settings)
        return self.runner.run(spec)

    def resolve_oid(self, oid: Optional[str]) -> str:
        if oid:
            return oid
        return extract_oid(self.context.current_line(), self.context.cursor_index())

    def resolve_label(self, label: Optional[str]) -> str:
        if label:
            return label
        return self.context.current_word()
