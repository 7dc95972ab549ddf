""" Package for the top level schematic model

    The :mod:`~.optical` subpackage provides the :class:`~.SchematicModel`
    container, with its :class:`~.SchematicSpec` settings, in
    :mod:`~.schematicmodel`. The default values and limits are in
    :mod:`~.model_constants`. Schematic models are saved as .rsk files and
    read back with the functions in :mod:`~.rskfile`.
"""
