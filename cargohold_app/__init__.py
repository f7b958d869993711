"""
In-memory cargo module for tracked items.
"""
