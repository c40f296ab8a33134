"""
Services module for business logic separation.

Each service wraps one collection and performs the store call behind one
endpoint, keeping identifier and enum checks out of the routing layer.
"""
