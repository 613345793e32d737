"""Focus order validation (WCAG 2.4.3 Focus Order).

Elements are classified by keyword so that a handful of reading-order rules
can be checked against the tab indices assigned to them.
"""

from types import MappingProxyType
from typing import Any, TypedDict

__all__ = [
    "ELEMENT_KEYWORDS",
    "get_element_type",
    "parse_element_list",
    "parse_index_list",
    "validate_logical_order",
    "check_completeness",
    "validate_focus_order",
]

# Order matters: the first group with a matching keyword wins.
ELEMENT_KEYWORDS = MappingProxyType(
    {
        "header": ("header", "h1", "logo"),
        "nav": ("nav", "menu", "navigation"),
        "main": ("main", "content", "article"),
        "button": ("button", "btn", "submit"),
        "input": ("input", "form", "field"),
        "footer": ("footer", "bottom"),
        "link": ("link", "a href"),
    }
)


class ValidationFindings(TypedDict):
    issues: list[str]
    recommendations: list[str]


class LogicalValidation(ValidationFindings):
    logical: bool
    complete: bool


class FocusOrderResult(TypedDict):
    elements: list[str]
    tabOrder: list[int]
    validation: dict[str, Any]
    recommendations: list[str]


def get_element_type(element: str) -> str:
    el = element.lower()
    for element_type, keywords in ELEMENT_KEYWORDS.items():
        if any(keyword in el for keyword in keywords):
            return element_type
    return "other"


def parse_element_list(value: Any) -> list[str]:
    """Parse ``"header,nav,main"`` or a JSON list into element labels."""
    if isinstance(value, str):
        return [label.strip() for label in value.split(",") if label.strip()]
    if isinstance(value, (list, tuple)):
        return [str(label) for label in value]
    raise ValueError("Invalid elements: expected a list or comma-separated string")


def parse_index_list(value: Any, name: str = "tab order") -> list[int]:
    """Parse ``"1,2,3"`` or a JSON list into integers."""
    if isinstance(value, str):
        items = value.split(",")
    elif isinstance(value, (list, tuple)):
        items = list(value)
    else:
        raise ValueError(f"Invalid {name}: expected a list or comma-separated string")
    indices: list[int] = []
    for item in items:
        if isinstance(item, bool):
            raise ValueError(f"Invalid {name} index: {item!r}")
        try:
            indices.append(int(str(item).strip()))
        except ValueError:
            raise ValueError(f"Invalid {name} index: {item!r}") from None
    return indices


def validate_logical_order(
    elements: list[str],
    tab_order: list[int],
    expected_order: list[int] | None = None,
) -> LogicalValidation:
    issues: list[str] = []
    recommendations: list[str] = []

    if expected_order is not None and tab_order != expected_order:
        issues.append("Tab order does not match expected logical sequence")
        recommendations.append("Adjust tab order to match expected reading sequence")

    types = [get_element_type(el) for el in elements]

    def position(element_type: str) -> int | None:
        if element_type not in types:
            return None
        index = types.index(element_type)
        return tab_order[index] if index < len(tab_order) else None

    header = position("header")
    main = position("main")
    footer = position("footer")

    if header is not None and main is not None and header > main:
        issues.append("Header appears after main content in tab order")
        recommendations.append("Move header/navigation before main content")

    if footer is not None and main is not None and footer < main:
        issues.append("Footer appears before main content in tab order")
        recommendations.append("Move main content before footer")

    if len(set(tab_order)) != len(tab_order):
        issues.append("Duplicate tab indices detected - may cause focus traps")
        recommendations.append("Ensure each interactive element has a unique tab index")

    if types.count("nav") > 1:
        recommendations.append(
            "Consider providing skip links for multiple navigation sections"
        )

    return LogicalValidation(
        logical=not issues,
        complete=len(elements) == len(tab_order),
        issues=issues,
        recommendations=recommendations,
    )


def check_completeness(elements: list[str], tab_order: list[int]) -> ValidationFindings:
    issues: list[str] = []
    recommendations: list[str] = []

    if len(elements) != len(tab_order):
        issues.append(
            f"Tab order length ({len(tab_order)}) doesn't match "
            f"element count ({len(elements)})"
        )
        recommendations.append("Ensure all interactive elements are included in tab order")

    ordered = sorted(tab_order)
    if any(b != a + 1 for a, b in zip(ordered, ordered[1:])):
        recommendations.append(
            "Consider using sequential tab indices for better predictability"
        )

    return ValidationFindings(issues=issues, recommendations=recommendations)


def validate_focus_order(
    elements: list[str],
    tab_order: list[int],
    expected_order: list[int] | None = None,
) -> FocusOrderResult:
    """Run every focus-order rule and merge the findings."""
    if not elements or not tab_order:
        raise ValueError("Both elements and tab order are required")

    logical = validate_logical_order(elements, tab_order, expected_order)
    completeness = check_completeness(elements, tab_order)

    return FocusOrderResult(
        elements=elements,
        tabOrder=tab_order,
        validation={
            "logical": logical["logical"],
            "complete": logical["complete"] and not completeness["issues"],
            "issues": logical["issues"] + completeness["issues"],
        },
        recommendations=logical["recommendations"] + completeness["recommendations"],
    )
