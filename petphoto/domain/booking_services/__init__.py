"""Booking_Service domain - Direct access to single booking/service links"""
