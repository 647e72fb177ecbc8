# ledgerchain

A small ledger made of hash-linked blocks. Each block holds an index, a
timestamp, a line of data, the hash of the block before it and its own hash.

The ledger starts with a genesis block (index 0, data `Genesis Block`,
previous hash `0`) and holds at most 100 blocks.

## Installing

```
pip install .
```

## The interactive menu

```
ledgerchain
```

This opens a menu that reads choices from standard input:

1. Add a new block (asks for the block's data)
2. Display the blockchain
3. Validate the blockchain
4. Save the blockchain to a file (asks for a file name)
5. Load the blockchain from a file (asks for a file name)
6. Exit

Any other choice prints `Invalid choice. Try again.`. The menu also ends when
standard input runs out. Errors (a full chain, a file that cannot be opened)
are reported on standard error and the menu carries on.

From Python, `ledgerchain.cli.run_menu(ledger, stdin, stdout)` runs the same
loop over a given `Blockchain` and text streams; `ledgerchain.cli.main()` is
the entry point of the command.

## Using it from Python

```python
from ledgerchain.blockchain import Blockchain

ledger = Blockchain()
ledger.add_block("Alice pays Bob 10")
ledger.add_block("Bob pays Carol 4")

print(len(ledger))          # 3, the genesis block included
print(ledger[1].data)       # Alice pays Bob 10
print(ledger.validate())    # True
print(ledger.format_chain())

ledger.save("ledger.txt")
restored = Blockchain()
restored.load("ledger.txt")
```

`Blockchain` takes an optional `clock`, a function returning the timestamp
string for new blocks; by default it is `ledgerchain.blockchain.current_time`,
the local time in `time.ctime()` form. A fixed clock makes timestamps and
hashes reproducible.

A `Blockchain` supports `len()`, iteration and indexing over its blocks.
`add_block(data)` appends and returns a new block linked to the last one, and
raises `ChainFullError` once the chain already holds 100 blocks.
`format_chain()` returns a readable listing of every block and
`display(stream)` writes it to a stream, standard output by default.

A chain is valid when every block after the first names the previous block's
hash as its previous hash and its stored hash matches the hash computed again
from its fields. The first block itself is not checked.

### File format

`save(filename)` writes one line per block:

```
index|timestamp|data|previous_hash|current_hash
```

`load(filename)` replaces the current chain with the blocks it reads, taking
the stored hashes as they are. Lines with fewer than five fields are skipped;
when a line has more than five, the extra fields are kept in the data. Only
the first 1023 characters of a line are read, and reading stops after 100
blocks. If the file cannot be opened, `OSError` is raised and the chain is
left as it was.

### Blocks

`ledgerchain.block.Block` is a dataclass with the fields `index`,
`timestamp`, `data`, `previous_hash` and `current_hash`.
`Block.create(index, timestamp, data, previous_hash)` builds a block and
computes its hash, `compute_hash()` computes the hash again from the block's
fields, and `is_consistent()` checks it against the stored hash.

`ledgerchain.block.checksum_hash(text)` gives the checksum of any string: the
bytes of its UTF-8 encoding, each taken as a signed value, are added into an
unsigned 32-bit total that wraps on overflow, and the total is written in
lower-case hexadecimal. A block's hash is the checksum of its index,
timestamp, data and previous hash written out together.

## What it does not do

The checksum is not a cryptographic hash: different contents easily share a
hash, so validation catches careless edits, not deliberate ones. The ledger
lives in one process and one file; there is no network, no sharing between
users and no proof of work.