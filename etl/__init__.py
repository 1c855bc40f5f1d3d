# WORKFLOW: ETL package for packing list ingestion.
# Used by: Dataset holder, API analyze endpoint
# Modules include:
# 1. records.py - PackingListItem record type with header-driven columns
# 2. packing_list_parser.py - Parse delimited text into ordered records
#
# ETL flow: Raw text -> Header + rows -> PackingListItem records -> Aggregator

"""
ETL package for packing list ingestion.
"""
