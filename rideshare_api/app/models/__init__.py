"""
Domain entities.

``ride`` defines the :class:`Ride` entity together with its
validation rules and the result types returned by construction and
validation.
"""
