"""
Employee Streams - Collection Processing Lessons

Stateless filter / map / reduce / group / sort / paginate operations
over in-memory employee records.
"""

__version__ = "0.1.0"
