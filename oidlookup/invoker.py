"""Translator invocation: parameter construction and process execution."""

from __future__ import annotations

import logging
import subprocess
from abc import ABC, abstractmethod
from typing import Dict, Optional, Tuple

from .configuration import OidLookupConfig
from .structures import InvocationSpec, LookupMode, TranslationResult

logger = logging.getLogger(__name__)

MODE_PARAMETERS: Dict[LookupMode, Tuple[str, ...]] = {
    LookupMode.OID: ("-m", "ALL", "-On", "-Td"),
    LookupMode.LABEL: ("-m", "ALL", "-IR", "-On", "-Td"),
    LookupMode.LIST_ALL: ("-m", "ALL", "-To"),
}

QUIET_FLAG = "-Ln"


def build_invocation(
    mode: LookupMode,
    payload: Optional[str],
    settings: OidLookupConfig,
) -> InvocationSpec:
    """Return the invocation for ``mode``.

    ``-Ln`` follows the mode flags whenever translator logging is off. The
    list-all mode takes no payload and ignores one if given.
    """

    parameters = MODE_PARAMETERS[mode]
    if not settings.logging_enabled:
        parameters = parameters + (QUIET_FLAG,)
    if mode is LookupMode.LIST_ALL:
        payload = None
    return InvocationSpec(
        executable=settings.translator,
        parameters=parameters,
        payload=payload,
    )


class TranslatorRunner(ABC):
    """Abstract adapter around the external translator."""

    @abstractmethod
    def run(self, spec: InvocationSpec) -> TranslationResult:
        """Execute ``spec`` and return whatever it printed."""


class SubprocessTranslatorRunner(TranslatorRunner):
    """Runs the translator as a blocking child process.

    Failures never raise: a missing executable, a non-zero exit status or
    an expired timeout all produce a result holding the output captured so
    far, which may be empty.
    """

    def __init__(self, *, timeout: Optional[float] = None) -> None:
        self.timeout = timeout

    def run(self, spec: InvocationSpec) -> TranslationResult:
        logger.debug("Running translator: %s", spec.command_line)
        try:
            completed = subprocess.run(
                spec.argv,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                stdin=subprocess.DEVNULL,
                text=True,
                errors="replace",
                timeout=self.timeout,
                check=False,
            )
        except subprocess.TimeoutExpired as exc:
            logger.warning(
                "Translator did not finish within %s seconds: %s",
                self.timeout,
                spec.command_line,
            )
            return TranslationResult(
                command_line=spec.command_line,
                output_lines=_split_output(exc.stdout),
            )
        except OSError as exc:
            logger.warning("Could not start translator %r: %s", spec.executable, exc)
            return TranslationResult(command_line=spec.command_line)

        if completed.returncode != 0:
            logger.warning(
                "Translator exited with status %s: %s",
                completed.returncode,
                (completed.stderr or "").strip() or spec.command_line,
            )
        elif completed.stderr:
            logger.debug("Translator diagnostics: %s", completed.stderr.strip())

        return TranslationResult(
            command_line=spec.command_line,
            output_lines=_split_output(completed.stdout),
            returncode=completed.returncode,
        )


def _split_output(output: Optional[str | bytes]) -> list[str]:
    if not output:
        return []
    if isinstance(output, bytes):
        output = output.decode("utf-8", errors="replace")
    return output.splitlines()


def build_runner(settings: OidLookupConfig) -> TranslatorRunner:
    """Create the default runner for the configured translator."""

    return SubprocessTranslatorRunner(timeout=settings.timeout)
