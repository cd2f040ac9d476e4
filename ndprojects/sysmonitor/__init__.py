"""Elapsed-time formatting and per-process statistics records."""