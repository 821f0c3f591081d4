"""
Root conftest: lets pytest import the top-level packages (core, distributions,
samples, engine, reporting) from a source checkout without installing.
"""
