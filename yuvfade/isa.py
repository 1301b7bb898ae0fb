"""RV64 instruction kinds, formats, system call numbers and decoded instructions."""

from __future__ import annotations

from dataclasses import dataclass, fields
from enum import IntEnum, auto


class InstrType(IntEnum):
    """Instruction encoding format."""

    I = 0  # noqa: E741
    U = auto()
    S = auto()
    N = auto()
    J = auto()
    SB = auto()
    R = auto()


class Instr(IntEnum):
    """RV64IM instructions, plus a pipeline bubble and an unknown marker."""

    LB = 0
    LH = auto()
    LW = auto()
    LD = auto()
    LBU = auto()
    LHU = auto()
    LWU = auto()
    SB = auto()
    SH = auto()
    SW = auto()
    SD = auto()
    ADDI = auto()
    SLTI = auto()
    SLTIU = auto()
    ANDI = auto()
    ORI = auto()
    XORI = auto()
    ADDIW = auto()
    SLLI = auto()
    SRLI = auto()
    SRAI = auto()
    SLLIW = auto()
    SRLIW = auto()
    SRAIW = auto()
    ADD = auto()
    SUB = auto()
    SLT = auto()
    SLTU = auto()
    AND = auto()
    OR = auto()
    XOR = auto()
    SLL = auto()
    SRL = auto()
    SRA = auto()
    ADDW = auto()
    SUBW = auto()
    SLLW = auto()
    SRLW = auto()
    SRAW = auto()
    BEQ = auto()
    BNE = auto()
    BLT = auto()
    BGE = auto()
    BLTU = auto()
    BGEU = auto()
    JAL = auto()
    JALR = auto()
    LUI = auto()
    AUIPC = auto()
    ECALL = auto()
    EBREAK = auto()
    MUL = auto()
    MULH = auto()
    MULHSU = auto()
    MULHU = auto()
    DIV = auto()
    DIVU = auto()
    REM = auto()
    REMU = auto()
    MULW = auto()
    DIVW = auto()
    DIVUW = auto()
    REMW = auto()
    REMUW = auto()
    NOP = auto()
    UNK = auto()


class Syscall(IntEnum):
    """RV64 system call numbers."""

    EXIT = 93
    EXIT_GROUP = 94
    GETPID = 172
    KILL = 129
    READ = 63
    WRITE = 64
    OPENAT = 56
    CLOSE = 57
    LSEEK = 62
    BRK = 214
    LINKAT = 37
    UNLINKAT = 35
    MKDIRAT = 34
    RENAMEAT = 38
    CHDIR = 49
    GETCWD = 17
    FSTAT = 80
    FSTATAT = 79
    FACCESSAT = 48
    PREAD = 67
    PWRITE = 68
    UNAME = 160
    GETUID = 174
    GETEUID = 175
    GETGID = 176
    GETEGID = 177
    MMAP = 222
    MUNMAP = 215
    MREMAP = 216
    MPROTECT = 226
    PRLIMIT64 = 261
    GETMAINVARS = 2011
    RT_SIGACTION = 134
    WRITEV = 66
    GETTIMEOFDAY = 169
    TIMES = 153
    FCNTL = 25
    FTRUNCATE = 46
    GETDENTS = 61
    DUP = 23
    READLINKAT = 78
    RT_SIGPROCMASK = 135
    IOCTL = 29
    GETRLIMIT = 163
    SETRLIMIT = 164
    GETRUSAGE = 165
    CLOCK_GETTIME = 113
    SET_TID_ADDRESS = 96
    SET_ROBUST_LIST = 99
    OPEN = 1024
    LINK = 1025
    UNLINK = 1026
    MKDIR = 1030
    ACCESS = 1033
    STAT = 1038
    LSTAT = 1039
    TIME = 1062


_OPERANDS: dict[InstrType, frozenset[str]] = {
    InstrType.I: frozenset({"imm", "rs1", "rs1_val", "rd"}),
    InstrType.U: frozenset({"imm", "rd"}),
    InstrType.S: frozenset({"imm", "rs1", "rs2", "rs1_val", "rs2_val"}),
    InstrType.R: frozenset({"rd", "rs1", "rs2", "rs1_val", "rs2_val"}),
    InstrType.SB: frozenset({"imm", "rs1", "rs2", "rs1_val", "rs2_val"}),
    InstrType.J: frozenset({"imm", "rd"}),
    InstrType.N: frozenset(),
}


@dataclass(frozen=True)
class DecodedInstr:
    """A decoded instruction; exactly the operands of its format are set."""

    pc: int
    ins: Instr
    type: InstrType
    imm: int | None = None
    rs1: int | None = None
    rs2: int | None = None
    rd: int | None = None
    rs1_val: int | None = None
    rs2_val: int | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "ins", Instr(self.ins))
        object.__setattr__(self, "type", InstrType(self.type))
        wanted = _OPERANDS[self.type]
        for field in fields(self)[3:]:
            value = getattr(self, field.name)
            if field.name in wanted and value is None:
                raise ValueError(
                    f"{self.type.name}-type instruction needs operand {field.name!r}"
                )
            if field.name not in wanted and value is not None:
                raise ValueError(
                    f"{self.type.name}-type instruction has no operand {field.name!r}"
                )