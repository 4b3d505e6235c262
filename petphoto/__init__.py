"""Pet photography booking API"""
