"""
Copyright (c) 2025. All rights reserved.
"""

"""
Test suite for the in-memory MapReduce engine.

Covers pair types, task queues, phase executors, the orchestrator,
observers, configuration, sample jobs and the command line driver.
"""
