"""
Lazy, pull-based pipelines of segments.

Values flow from a Pump through any number of segments; each segment only
asks its upstream for a value when its own consumer asks it for one. The
DSL wraps a chain in a fluent interface::

    from pipegraph.pipeline import dsl

    dsl([1, 2, 3, 4, 2, 5]).as_("seen").map(lambda x: x * 2).only("seen").to_list()
    # [2, 4, 4]
"""

from pipegraph.pipeline.segment import Segment
from pipegraph.pipeline.pump import Pump
from pipegraph.pipeline.transform import Transform
from pipegraph.pipeline.filter import Filter
from pipegraph.pipeline.expander import Expander
from pipegraph.pipeline.sender import Sender, OPERATIONS
from pipegraph.pipeline.journal import Journal
from pipegraph.pipeline.journal_filter import JournalFilter
from pipegraph.pipeline.split import Split, Also
from pipegraph.pipeline.trace import Trace
from pipegraph.pipeline.traverse import Traverse
from pipegraph.pipeline.unique import Unique
from pipegraph.pipeline.dsl import DSL, dsl

__all__ = [
    "Segment",
    "Pump",
    "Transform",
    "Filter",
    "Expander",
    "Sender",
    "OPERATIONS",
    "Journal",
    "JournalFilter",
    "Split",
    "Also",
    "Trace",
    "Traverse",
    "Unique",
    "DSL",
    "dsl",
]
