"""
Keyword indexing and query engine package.

- analyzers: Whitespace tokenization and keyword normalization
- models: Occurrence value objects and posting list aliases
- scanner: Per-document keyword frequency tables
- ordering: Binary-search repositioning of the newest posting
- index: Keyword index and document merge step
- query: Two-keyword ranked OR search
"""
