"""Photographers domain - Staff who run sessions, with availability"""
