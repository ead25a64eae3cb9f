"""Export of drained graphs.

Classes:
    Batch: Flat, unordered collection of exported tasks.
    ExportedTask: One task with its label and predecessor labels.
"""

from dagsmith.core.export.batch import Batch, ExportedTask
from dagsmith.core.export.render import batch_table, print_batch

__all__ = ["Batch", "ExportedTask", "batch_table", "print_batch"]
