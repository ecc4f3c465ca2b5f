from dataclasses import dataclass


# fmt: off
@dataclass(frozen=True)
class RegistryStatsModel:
    total_records: int   # Number of stored short URL records
    next_id: int         # Identifier the next new record will receive
    total_accesses: int  # Sum of hits across all records
# fmt: on
