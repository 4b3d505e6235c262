"""Pets domain - Animals registered against an owner"""
