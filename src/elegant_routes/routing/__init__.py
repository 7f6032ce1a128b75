"""Routing — declarative route trees to navigation records, plus the route map.

Records are built once per transform call and never share state with
the declarative input.
"""
