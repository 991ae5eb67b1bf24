"""
Answer submissions: the only write path of the backend.
"""
