"""Ordering and placement policies for the batch scheduler simulator."""
