"""Compare a function's signature with its documented parameters."""
from __future__ import annotations

from staledocs.core.config import CheckConfig
from staledocs.core.results import CheckResult
from staledocs.docstrings.parser import DocstringParser
from staledocs.docstrings.styles import DocumentedParam
from staledocs.signatures.models import Parameter, Signature

DOCSTRING_MISSING = "docstring missing"
ARGS_SECTION_MISSING = "args section missing"


class RuleChecker:
    """Decide whether one signature and its docstring agree.

    Parameters
    ----------
    config : CheckConfig
        Run-wide flags. The checker keeps a reference and never changes it.

    Examples
    --------
    >>> from staledocs.signatures import extract_signatures
    >>> source = "def f(x):\\n    '''Args:\\n        x: The x.\\n    '''\\n"
    >>> checker = RuleChecker(CheckConfig())
    >>> bool(checker.check(next(extract_signatures(source))))
    True
    """

    def __init__(self, config: CheckConfig) -> None:
        self.config = config
        self._parser = DocstringParser(
            config.docstring_style,
            config.break_on_empty_line,
            config.skip_variadic_params,
        )

    def check(self, signature: Signature) -> CheckResult:
        """Apply the rules to a signature, in order.

        1. A missing docstring passes only under ``succeed_if_no_docstring``.
        2. A docstring without an args section passes only under
           ``succeed_if_no_args_section``.
        3. Otherwise the documented list must match the signature.

        Returns
        -------
        CheckResult
            Truthy when compliant; ``message`` holds the diagnostic otherwise.
        """
        docstring = signature.docstring
        if docstring is None:
            return self._verdict(signature, self.config.succeed_if_no_docstring, DOCSTRING_MISSING)

        documented = self._parser.parse(docstring)
        if documented is None:
            return self._verdict(
                signature, self.config.succeed_if_no_args_section, ARGS_SECTION_MISSING
            )

        problem = self.compare(signature.params, documented)
        if problem is None:
            return self._verdict(signature, True, "")
        return self._verdict(signature, False, mismatch_message(problem, signature.params, documented))

    def compare(self, params: list[Parameter], documented: list[DocumentedParam]) -> str | None:
        """Return a description of the first disagreement, or None.

        Lengths are compared before any positional check, so a surplus or
        missing trailing entry is never hidden by pairing.
        """
        if len(params) != len(documented):
            return f"{len(params)} parameters in signature, {len(documented)} documented"

        lenient = self.config.succeed_if_docstring_untyped
        for position, (param, doc) in enumerate(zip(params, documented), start=1):
            if param.name != doc.name:
                return f"parameter {position} is {param.name!r} but {doc.name!r} is documented"

            if param.annotation == doc.type_text:
                continue
            if lenient and (param.annotation is None or doc.type_text is None):
                continue
            return (
                f"parameter {param.name!r} has type {param.annotation!r} "
                f"but is documented as {doc.type_text!r}"
            )

        return None

    def _verdict(self, signature: Signature, success: bool, message: str) -> CheckResult:
        return CheckResult(
            success=success,
            message=message,
            function_name=signature.name,
            line=signature.line,
        )


def format_params(params: list[Parameter] | list[DocumentedParam]) -> str:
    """Render a parameter list as ``(a: int, b)``."""
    return "(" + ", ".join(str(p) for p in params) + ")"


def mismatch_message(
    problem: str, params: list[Parameter], documented: list[DocumentedParam]
) -> str:
    return (
        f"docstring does not match signature ({problem}); "
        f"signature {format_params(params)}, docstring {format_params(documented)}"
    )


def check_signature(signature: Signature, config: CheckConfig) -> CheckResult:
    """Check one signature against its docstring.

    Parameters
    ----------
    signature : Signature
        The extracted signature.
    config : CheckConfig
        Run-wide flags.

    Returns
    -------
    CheckResult
        Compliant results are truthy.
    """
    return RuleChecker(config).check(signature)
