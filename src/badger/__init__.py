"""BadgeRotator: rotates badges through a fixed set of remote slots.

The package keeps the catalog, selection and slot table in one shared state
container, persists selections as flat JSON snapshots, rotates named presets
on a timer and pushes a random pick per slot to the remote service.
"""
