"""Owners domain - Customers who book sessions for their pets"""
