"""Opcode mnemonics per instruction set."""

from __future__ import annotations

from types import MappingProxyType
from typing import Final, Mapping

from asmnav.syntax.table import Target

MOS6502_OPCODES: Final[frozenset[str]] = frozenset(
    {
        "ADC", "AND", "ASL", "BCC", "BCS", "BEQ", "BIT", "BMI", "BNE", "BPL",
        "BRK", "BVC", "BVS", "CLC", "CLD", "CLI", "CLV", "CMP", "CPX", "CPY",
        "DEC", "DEX", "DEY", "EOR", "INC", "INX", "INY", "JMP", "JSR", "LDA",
        "LDX", "LDY", "LSR", "NOP", "ORA", "PHA", "PHP", "PLA", "PLP", "ROL",
        "ROR", "RTI", "RTS", "SBC", "SEC", "SED", "SEI", "STA", "STX", "STY",
        "TAX", "TAY", "TSX", "TXA", "TXS", "TYA",
    }
)  # fmt: skip

MOS6502_ILLEGAL_OPCODES: Final[frozenset[str]] = MOS6502_OPCODES | frozenset(
    {
        "ALR", "ANC", "ANE", "ARR", "DCP", "ISC", "JAM", "LAS", "LAX", "RLA",
        "RRA", "SAX", "SBX", "SHA", "SHS", "SHX", "SHY", "SLO", "SRE",
    }
)  # fmt: skip

MOS65C02_OPCODES: Final[frozenset[str]] = MOS6502_OPCODES | frozenset(
    {"BRA", "PHX", "PHY", "PLX", "PLY", "STZ", "TRB", "TSB"}
)

WDC65816_OPCODES: Final[frozenset[str]] = MOS65C02_OPCODES | frozenset(
    {
        "BRL", "COP", "JML", "JSL", "MVN", "MVP", "PEA", "PEI", "PER", "PHB",
        "PHD", "PHK", "PLB", "PLD", "REP", "RTL", "SEP", "STP", "TCD", "TCS",
        "TDC", "TSC", "TXY", "TYX", "WAI", "WDM", "XBA", "XCE",
    }
)  # fmt: skip

INSTRUCTION_SETS: Final[Mapping[Target, frozenset[str]]] = MappingProxyType(
    {
        Target.MOS6502: MOS6502_OPCODES,
        Target.MOS6502_ILLEGAL: MOS6502_ILLEGAL_OPCODES,
        Target.MOS65C02: MOS65C02_OPCODES,
        Target.WDC65816: WDC65816_OPCODES,
    }
)


def instructions_for(target: Target) -> frozenset[str]:
    return INSTRUCTION_SETS[target]
