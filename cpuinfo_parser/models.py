#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
File: models.py

Description:
------------
Data structures produced by the parser: one Cpu per logical processor and a
CpuInfo document holding all of them in input order.

All structures are frozen; list-valued attributes are stored as tuples.
"""

from dataclasses import dataclass, field, fields, asdict
from typing import Any, Dict, Iterator, List, Optional, Tuple


@dataclass(frozen=True)
class AddressSizes:
    """Physical and virtual address widths in bits."""

    physical: int
    virtual: int

    def to_dict(self) -> Dict[str, int]:
        return {"physical": self.physical, "virtual": self.virtual}


@dataclass(frozen=True)
class Cpu:
    """Attributes of a single logical processor."""

    # identity
    processor: int
    vendor_id: str
    cpu_family: int
    model: int
    model_name: str
    stepping: int
    microcode: int

    # performance
    cpu_mhz: float

    # cache size in bytes
    cache_size: int

    # topology
    physical_id: int
    siblings: int
    core_id: int
    cpu_cores: int
    apicid: int
    initial_apicid: int

    fpu: bool
    fpu_exception: bool
    cpuid_level: int
    wp: bool

    flags: Tuple[str, ...]
    vmx_flags: Tuple[str, ...]
    bugs: Tuple[str, ...]

    bogomips: float
    clflush_size: int
    cache_alignment: int
    address_sizes: AddressSizes
    power_management: Optional[str] = None

    def has_flag(self, name: str) -> bool:
        """Check whether the processor reports the given feature flag."""
        return name in self.flags

    def to_dict(self) -> Dict[str, Any]:
        """Convert the Cpu to a dictionary."""
        result = asdict(self)
        for key in ("flags", "vmx_flags", "bugs"):
            result[key] = list(result[key])
        return result

    @classmethod
    def attribute_names(cls) -> List[str]:
        """Attribute names in declaration order."""
        return [f.name for f in fields(cls)]


@dataclass(frozen=True)
class CpuInfo:
    """Ordered collection of parsed processor records."""

    cpus: Tuple[Cpu, ...] = field(default_factory=tuple)

    def __len__(self) -> int:
        return len(self.cpus)

    def __iter__(self) -> Iterator[Cpu]:
        return iter(self.cpus)

    def __getitem__(self, index: int) -> Cpu:
        return self.cpus[index]

    @property
    def vendors(self) -> List[str]:
        """Distinct vendor identifiers, in first-seen order."""
        return list(dict.fromkeys(cpu.vendor_id for cpu in self.cpus))

    @property
    def model_names(self) -> List[str]:
        """Distinct model names, in first-seen order."""
        return list(dict.fromkeys(cpu.model_name for cpu in self.cpus))

    @property
    def physical_packages(self) -> List[int]:
        """Sorted distinct physical package ids."""
        return sorted({cpu.physical_id for cpu in self.cpus})

    def topology(self) -> Dict[int, Dict[int, List[int]]]:
        """
        Map physical package id to core id to the processors on that core.

        Returns:
            Dictionary of the form {package: {core: [processor, ...]}}.
        """
        result: Dict[int, Dict[int, List[int]]] = {}
        for cpu in self.cpus:
            cores = result.setdefault(cpu.physical_id, {})
            cores.setdefault(cpu.core_id, []).append(cpu.processor)
        return result

    def common_flags(self) -> List[str]:
        """Flags reported by every processor, in the first processor's order."""
        if not self.cpus:
            return []
        shared = set(self.cpus[0].flags)
        for cpu in self.cpus[1:]:
            shared &= set(cpu.flags)
        return [flag for flag in dict.fromkeys(self.cpus[0].flags) if flag in shared]

    def to_dict(self) -> Dict[str, Any]:
        """Convert the CpuInfo to a dictionary."""
        return {"cpus": [cpu.to_dict() for cpu in self.cpus]}
