"""
Copyright (c) 2025. All rights reserved.
"""

"""
Sample jobs for the MapReduce engine.

Each module holds one job class with static map and reduce functions.
"""
