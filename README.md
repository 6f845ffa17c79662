# splc

`splc` holds the machine-level half of a compiler for SPL, a small
block-structured teaching language. It builds instructions for a simple stack
machine (SSM), encodes them as 32-bit words, and reads and writes the binary
object files (BOF) that the machine loads.

## Modules

- `splc.instruction`: the instruction formats as frozen dataclasses
  (`CompInstr`, `OtherCompInstr`, `SyscallInstr`, `ImmedInstr`, `UImmedInstr`,
  `JumpInstr`) and the enums `OpCode`, `Func0`, `Func1`, `SyscallCode` and
  `InstrType`. Each instruction has `encode()`, which checks that every field
  fits its bit width and raises `InstructionError` otherwise. `decode(word)`
  turns a word back into an instruction. `mnemonic`, `syscall_mnemonic` and
  `assembly_form(addr, instr)` give the assembly form; `print_table_heading`
  and `print_instruction` write a listing; `write_instruction` and
  `read_instruction` move single instructions through a BOF writer or reader.
- `splc.code`: one function per mnemonic (`nop`, `add`, `sub`, `lwr`, `swr`,
  `lit`, `ari`, `sri`, `mul`, `div`, `jrel`, `addi`, `andi`, `beq`, `bne`,
  `jmpa`, `call`, `rtn`, `exit_`, `pint`, `rch`, `stra`, `notr` and the
  rest). `and_` and `exit_` carry a trailing underscore. `srl` is encoded with
  the `SLL` function code.
- `splc.code_seq`: `CodeSeq`, an ordered, iterable sequence of instructions
  with `append`, `extend`, `first`, `rest`, `last`, `is_empty` and
  `debug_print(out)`, which writes one assembly line per instruction.
- `splc.code_utils`: ready-made sequences: `copy_regs`, `compute_fp`,
  `load_static_link_into_reg`, `allocate_stack_space`,
  `deallocate_stack_space`, `save_registers_for_ar`,
  `restore_registers_from_ar`, `set_up_program` and `tear_down_program`. It
  also names the registers `GP` (0), `SP` (1), `FP` (2) and `RA` (7).
- `splc.bof`: `BOFHeader` (with `to_bytes`, `from_bytes` and
  `has_correct_magic`), and the context managers `BOFWriter` and `BOFReader`.
  Files start with the magic number `BO32`; words are little-endian. Failures
  raise `BOFError`.
- `splc.literal_table`: `LiteralTable`, which gives each distinct literal
  text one word offset in the data section and writes the values out in
  order (or reversed) with `output(writer, backwards)`.
- `splc.file_location` and `splc.lexical_address`: the small value types
  `FileLocation` (printed as `file:line`) and `LexicalAddress` (printed as
  `(levels,offset)`).

## Installing

```
pip install .
```

With the `test` extra, the tests can be run:

```
pip install ".[test]"
pytest
```

## Examples

Print a short sequence in assembly form:

```python
import sys

from splc import code
from splc.code_seq import CodeSeq

seq = CodeSeq([code.nop(), code.exit_(0)])
seq.debug_print(sys.stdout)
```

Write an object file by hand:

```python
from splc import code, code_utils
from splc.bof import BYTES_PER_WORD, BOFHeader, BOFWriter
from splc.instruction import write_instruction
from splc.literal_table import LiteralTable

literals = LiteralTable()
offset = literals.lookup("42", 42)

seq = code_utils.set_up_program()
seq.extend(code_utils.allocate_stack_space(1))
seq.append(code.lwi(code_utils.SP, 0, code_utils.GP, offset))
seq.append(code.pint(code_utils.SP, 0))
seq.extend(code_utils.tear_down_program())

text_length = len(seq) * BYTES_PER_WORD
data_start = max(text_length, 1024) + BYTES_PER_WORD
header = BOFHeader(
    text_start_address=0,
    text_length=text_length,
    data_start_address=data_start,
    data_length=len(literals) * BYTES_PER_WORD,
    stack_bottom_addr=data_start + len(literals) * BYTES_PER_WORD + 4096,
)

with BOFWriter("program.bof") as writer:
    writer.write_header(header)
    for instr in seq:
        write_instruction(writer, instr)
    literals.output(writer)
```

Read it back:

```python
from splc.bof import BOFReader
from splc.instruction import assembly_form, read_instruction

with BOFReader("program.bof") as reader:
    header = reader.read_header()
    for addr in range(header.text_length // 4):
        print(addr, assembly_form(addr, read_instruction(reader)))
```

## What this package does not do

There is no lexer, parser, syntax tree, symbol table or code generator here,
and no command-line program: the package does not read SPL source text. It
provides the instruction, code-sequence and object-file layers that such a
compiler builds on, and a caller assembles instruction sequences itself.
It also has no stack machine to run the object files it writes.