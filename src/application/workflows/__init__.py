"""Workflows - multi-stage business processes built from pure stages."""
