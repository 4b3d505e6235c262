"""Services domain - Priced offerings that can be attached to bookings"""
