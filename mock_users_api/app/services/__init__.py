"""
Service layer abstraction.

The stores in this package hold all application data in process
memory.  Instances are created by ``create_app`` and reached from the
endpoints through dependencies, never through module globals.
"""
