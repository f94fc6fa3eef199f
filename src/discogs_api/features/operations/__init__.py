# Where: discogs_api.features.operations
# What: Operation catalog, request planning, dispatch and response decoding.
# Why: Group the registry-driven request pipeline under one feature package.

"""Registry-driven operation dispatch."""
