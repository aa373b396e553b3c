"""TWL table parsing, normalization, augmentation, and reconciliation.

Submodules:
  patterns        -- header names, compiled regex patterns and constants
  errors          -- SchemaError / StructureError
  references      -- chapter:verse parsing and the reference comparator
  schema          -- Table Pydantic model
  normalize       -- TSV validation, column-count normalization, parsing, serialization
  augment         -- GLQuote / GLOccurrence column insertion
  ids             -- unique row identifier assignment
  reconcile       -- merge of generated rows with an existing dataset
  disambiguation  -- manual disambiguation parsing and option switching
  filters         -- deleted-row markers, unlinked words, row removal
  links           -- rc:// link and reference URL helpers
  pipeline        -- main run() entry point and CLI
"""
