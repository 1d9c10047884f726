"""Simple in-process counters using only the Python standard library.

Counters are collected in a module-level registry and can be exported in
the Prometheus text exposition format.  The store has no endpoint to
scrape, so the CLI writes the export to the application log at exit.
"""

from collections import defaultdict
from typing import Dict, Iterable, List, Tuple


class Counter:
    """Simple counter metric.  Call ``inc()`` to increment by 1.

    The ``inc`` method accepts keyword arguments matching the label
    names provided at construction time.  Example:

    ``CHECKOUTS_TOTAL.inc(payment_method="GCash")``
    """

    def __init__(self, name: str, description: str, label_names: Iterable[str]):
        self.name = name
        self.description = description
        self.label_names = list(label_names)
        # Map from label tuple to integer count
        self._values: Dict[Tuple[str, ...], int] = defaultdict(int)
        _METRIC_REGISTRY.append(self)

    def _label_tuple(self, labels: Dict[str, str]) -> Tuple[str, ...]:
        return tuple(str(labels.get(k, "")) for k in self.label_names)

    def _format_labels(self, label_values: Tuple[str, ...]) -> str:
        if not self.label_names:
            return ""
        pairs = [f'{name}="{value}"' for name, value in zip(self.label_names, label_values)]
        return "{" + ",".join(pairs) + "}"

    def inc(self, **labels: str) -> None:
        self._values[self._label_tuple(labels)] += 1

    def value(self, **labels: str) -> int:
        """Current count for the given label values (0 if never incremented)."""
        return self._values.get(self._label_tuple(labels), 0)

    def reset(self) -> None:
        self._values.clear()

    def to_prometheus(self) -> List[str]:
        """Return a list of strings in Prometheus exposition format."""
        lines = [f"# HELP {self.name} {self.description}", f"# TYPE {self.name} counter"]
        for label_values, value in self._values.items():
            lines.append(f"{self.name}{self._format_labels(label_values)} {value}")
        return lines


_METRIC_REGISTRY: List[Counter] = []


def generate_metrics_text() -> str:
    """Generate the text representation of all registered metrics."""
    lines: List[str] = []
    for metric in _METRIC_REGISTRY:
        lines.extend(metric.to_prometheus())
    return "\n".join(lines)


def reset_metrics() -> None:
    """Zero every registered counter (used between test cases)."""
    for metric in _METRIC_REGISTRY:
        metric.reset()


# -----------------------------------------------------------------------------
# Counters used by the store application.
# -----------------------------------------------------------------------------

CART_ADDITIONS_TOTAL = Counter(
    name="cart_additions_total",
    description="Total number of entries added to the shopping cart",
    label_names=[],
)

# Successful checkouts, labelled by payment method label
CHECKOUTS_TOTAL = Counter(
    name="checkouts_total",
    description="Total number of completed checkouts",
    label_names=["payment_method"],
)

CHECKOUT_CANCELLED_TOTAL = Counter(
    name="checkout_cancelled_total",
    description="Total number of checkouts that did not complete, labelled by reason",
    label_names=["reason"],
)

# Rejected user input, labelled by error class name
INPUT_ERRORS_TOTAL = Counter(
    name="input_errors_total",
    description="Total number of rejected user inputs, labelled by type",
    label_names=["type"],
)
