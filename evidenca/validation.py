from collections.abc import Mapping

from pydantic import ValidationError

from .errors import EmployeeValidationError, ExpenseValidationError, ReportValidationError
from .models import EmployeeIn, ExpenseIn, FinancialReportIn


def _failed_fields(exc: ValidationError) -> set:
    return {err["loc"][0] for err in exc.errors() if err["loc"]}


def parse_expense(data) -> ExpenseIn:
    """
    Preveri telo zahtevka za strošek in vrne ExpenseIn.
    Najprej se preveri name ("Invalid name"), šele nato amount ("Invalid amount").
    """
    if not isinstance(data, Mapping):
        raise ExpenseValidationError("Invalid name")
    try:
        return ExpenseIn.model_validate(dict(data))
    except ValidationError as exc:
        if "name" in _failed_fields(exc):
            raise ExpenseValidationError("Invalid name") from exc
        raise ExpenseValidationError("Invalid amount") from exc


def validate_expense(data) -> bool:
    parse_expense(data)
    return True


def parse_employee(data) -> EmployeeIn:
    # manjkajoče polje ali napačen tip -> vedno isto sporočilo
    if not isinstance(data, Mapping):
        raise EmployeeValidationError()
    try:
        return EmployeeIn.model_validate(dict(data))
    except ValidationError as exc:
        raise EmployeeValidationError() from exc


def parse_financial_report(data) -> FinancialReportIn:
    if not isinstance(data, Mapping):
        raise ReportValidationError("Invalid report")
    try:
        return FinancialReportIn.model_validate(dict(data))
    except ValidationError as exc:
        fields = sorted(str(f) for f in _failed_fields(exc))
        raise ReportValidationError(f"Invalid {', '.join(fields) or 'report'}") from exc
