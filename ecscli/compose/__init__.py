"""Compose-file project context, value types, info tables, lookups and env merging."""