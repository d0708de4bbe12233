"""
Agent implementations for the D&R Protocol.

Contains all stage modules that process text through the pipeline:
- Ingestion Agent
- Deconstruction Agent (sentence splitting + classification)
- Keyword Scorer
- Focal Point Selector
- Re-architecture Agent
- Aggregation (Report Assembler + Keyword Table Builder)
"""
