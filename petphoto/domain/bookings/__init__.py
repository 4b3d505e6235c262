"""
Bookings domain - Scheduled sessions and their selected services

A booking links one owner, one pet and one photographer, and owns a set of
booking_services rows. Updates replace that set wholesale.
"""
