"""
Test Suite for the Cash Drawer Reconciler

Test Structure:
- unit/: Unit tests mirroring src/ package structure
- integration/: CLI workflow tests

Test Categories:
- Core utilities (currency, config)
- Drawer field store, modes, validation and totals
- Envelope allocation and views
- Snapshot persistence and shift reports
"""
