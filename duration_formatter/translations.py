from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import Mapping

from duration_formatter.errors import MissingTranslationError
from duration_formatter.units import Unit


class Form(Enum):
    PLURAL = "plural"
    SINGULAR = "singular"
    SHORT = "short"


def _freeze(table: dict[Unit, dict[Form, str]]) -> Mapping[Unit, Mapping[Form, str]]:
    return MappingProxyType({unit: MappingProxyType(dict(forms)) for unit, forms in table.items()})


# Единицы длительности (ru)
TRANSLATIONS: Mapping[Unit, Mapping[Form, str]] = _freeze({
    Unit.YEARS: {
        Form.PLURAL: "{} лет",
        Form.SINGULAR: "{} год",
        Form.SHORT: "{}г",
    },
    Unit.MONTHS: {
        Form.PLURAL: "{} месяцев",
        Form.SINGULAR: "{} месяц",
        Form.SHORT: "{}мес",
    },
    Unit.WEEKS: {
        Form.PLURAL: "{} недель",
        Form.SINGULAR: "{} неделя",
        Form.SHORT: "{}нед",
    },
    Unit.DAYS: {
        Form.PLURAL: "{} дней",
        Form.SINGULAR: "{} день",
        Form.SHORT: "{}д",
    },
    Unit.HOURS: {
        Form.PLURAL: "{} часов",
        Form.SINGULAR: "{} час",
        Form.SHORT: "{}ч",
    },
    Unit.MINUTES: {
        Form.PLURAL: "{} минут",
        Form.SINGULAR: "{} минута",
        Form.SHORT: "{}м",
    },
    Unit.SECONDS: {
        Form.PLURAL: "{} секунд",
        Form.SINGULAR: "{} секунда",
        Form.SHORT: "{}с",
    },
})


def missing_entries(table: Mapping[Unit, Mapping[Form, str]]) -> list[tuple[Unit, Form]]:
    """Return every (unit, form) pair the table cannot resolve."""
    return [
        (unit, form)
        for unit in Unit
        for form in Form
        if form not in table.get(unit, {})
    ]


def check_table(table: Mapping[Unit, Mapping[Form, str]]) -> None:
    missing = missing_entries(table)
    if missing:
        pairs = ", ".join(f"{unit.key}.{form.value}" for unit, form in missing)
        raise MissingTranslationError(f"translation table is incomplete: {pairs}")


check_table(TRANSLATIONS)


def select_form(count: int, concise: bool) -> Form:
    """Pick the template form: short when concise, else singular only for one."""
    if concise:
        return Form.SHORT
    return Form.SINGULAR if count == 1 else Form.PLURAL


def template_for(unit: Unit, form: Form) -> str:
    try:
        return TRANSLATIONS[unit][form]
    except KeyError:
        raise MissingTranslationError(
            f"no translation for {getattr(unit, 'key', unit)}.{getattr(form, 'value', form)}"
        ) from None


def format_part(count: int, unit: Unit, concise: bool) -> str:
    return template_for(unit, select_form(count, concise)).format(count)
