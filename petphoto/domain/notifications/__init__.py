"""Notifications domain - Messages sent to owners"""
