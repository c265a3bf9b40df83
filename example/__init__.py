"""Example driver for the tennis session analyzer."""
