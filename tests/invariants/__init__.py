"""
Layout Structural Invariants

Verifiers for the properties the validator must never lose: a closed
catalog of 65 widths, eight periodic residue classes with a single
ByteAligned holder, and backends with no false accepts or rejects.
"""
