# qtools

A small toolkit for context-free grammars written in BNF, and an in-memory
model of cQASM quantum programs with a semantic checker.

## Grammar format

```
# comments start with a pound sign
> <program>          # the distinguished symbol
/ <empty>            # the symbol standing for the empty string

<program> ::= <statement> <program>
           |  <statement>
<statement> ::= 'print' <expr>
```

Nonterminals are the symbols that appear on the left of a rule; every other
symbol is terminal. The rule separator may be written `::=`, `:=`, `:` or
`=`. Indented lines continue the previous rule, and `|` separates
alternatives. Symbol names are at most 50 characters long.

Problems in the input do not stop reading. Each one is written to standard
error as ` >>MESSAGE on line N<<` and also kept in `Grammar.diagnostics`
as a `(message, line)` pair.

## Commands

Every command reads a grammar from standard input. Its output goes to
standard output.

| Command        | What it does                                                         |
|----------------|----------------------------------------------------------------------|
| `gcopy`        | Reads the grammar and writes it back in normalised form              |
| `gdeebnf`      | Rewrites `( )`, `[ ]` and `{ }` groups as plain BNF rules            |
| `gdeempty`     | Removes the empty symbol and adds the rules that replace it          |
| `gsqueeze`     | Drops duplicate rules and inlines symbols that have only one rule    |
| `gstartfollow` | Writes the grammar with the start and follow set of each nonterminal |
| `gstats`       | Counts symbols and rules, and reports the ones that cannot be reached |
| `gsample`      | Writes one random sentence derived from the grammar                  |

```
gdeebnf < grammar.ebnf | gdeempty | gsqueeze > grammar.bnf
gstats < grammar.bnf
```

The same tools are also available through one command that takes the tool
name (`copy`, `deebnf`, `deempty`, `sample`, `squeeze`, `startfollow`,
`stats`) as its first argument:

```
qtools stats < grammar.bnf
```

The written grammar starts with the distinguished symbol and the empty
symbol. Then come the rules reachable from the distinguished symbol, and
after them the reachable terminals, the unused rules and the unused
terminals. Lines are wrapped at 80 columns.

## Library use

```python
import io
from qtools.reader import read_grammar
from qtools.deebnf import deebnf
from qtools.deempty import deempty
from qtools.grammar_writer import format_grammar

grammar = read_grammar(io.StringIO(text))   # a plain string works too
deebnf(grammar)
deempty(grammar)
print(format_grammar(grammar))
```

- `qtools.grammar` holds the data model: `Grammar`, `Symbol`, `Production`,
  `Element`, `SymbolState` and `same_rule`.
- `qtools.grammar_writer.write_grammar(grammar, stream)` writes the grammar
  to a stream. `format_grammar(grammar)` returns the same text as a string.
- `qtools.squeeze.squeeze(grammar)` and
  `qtools.startfollow.compute_start_follow(grammar)` change the grammar in
  place. The second fills in `Symbol.starter` and `Symbol.follows`.
- `qtools.stats.grammar_stats(grammar)` returns a `GrammarStats` record, and
  `format_stats` renders it the way `gstats` prints it.
- `qtools.sample.sample(grammar, rng)` returns one random sentence. Pass a
  seeded `random.Random` as `rng` to make the output reproducible.
- `qtools.writer.OutputWriter` is the column-tracking writer the tools use.

## cQASM

`qtools.qasm_ast` provides `NumericalIdentifiers`, `Qubits`, `Bits`,
`Operation` and `QasmError`. `qtools.qasm_program` provides
`OperationsCluster`, `SubCircuit`, `SubCircuits` and `QasmRepresentation`.
A `QasmRepresentation` holds the subcircuits, the size of the qubit
register, named qubit and bit mappings, and an error model. The error model
defaults to `"None"` with the single parameter `0.0`.

```python
from qtools.qasm_ast import NumericalIdentifiers, Operation, Qubits
from qtools.qasm_program import OperationsCluster, QasmRepresentation
from qtools.qasm_semantic import check_qasm

program = QasmRepresentation(num_qubits=2)
indices = NumericalIdentifiers()
indices.add_index(0)
cluster = OperationsCluster(line_number=3)
cluster.add_operation(Operation.single("H", Qubits(indices)))
program.subcircuits.last_subcircuit().add_operations_cluster(cluster)
check_qasm(program)   # returns 0
```

`check_qasm` raises `QasmError` in three cases:

- a subcircuit has an iteration count below 1;
- a qubit index falls outside the qubit register;
- the qubit lists of a multi-qubit gate differ in length.

## What it does not do

There is no reader for cQASM source text and no command for cQASM.
Programs must be built in Python from the classes above before they can be
checked.