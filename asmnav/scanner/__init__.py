"""Partition scanner."""

from asmnav.scanner.partitions import Partition, PartitionKind, partition_at
from asmnav.scanner.scanner import PartitionScanner, dump_partitions, scan_partitions

__all__ = [
    "Partition",
    "PartitionKind",
    "PartitionScanner",
    "dump_partitions",
    "partition_at",
    "scan_partitions",
]
