#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Copyright © 2020 Michael J. Hayford
"""Read an .rsk file and return a SchematicModel instance

.. Created on Sun Jul 12 22:25:37 2020

.. codeauthor: Michael J. Hayford
"""

import logging
from pathlib import Path

import json_tricks
from packaging import version

from raysketch.aperture.propagate import propagate_apertures
from raysketch.optical.schematicmodel import rsk_format_version

logger = logging.getLogger(__name__)

# module locations used by files written before format version 0.2.0.
# json_tricks writes each module path as its own quoted string, so the
# quotes are part of the match.
module_repl_010 = {
    '"raysketch.optical.elements"': '"raysketch.elem.elements"',
    '"raysketch.optical.geometry"': '"raysketch.elem.geometry"',
    '"raysketch.optical.schematic"': '"raysketch.optical.schematicmodel"',
    }


def preprocess_rsk(file_name, str_replacements):
    """Read and preprocess raw rsk text file, returning preprocessed text."""
    with open(file_name, 'r') as f:
        contents = f.read()
    for old, new in str_replacements.items():
        contents = contents.replace(old, new)

    return contents


def postprocess_rsk(schm_model, file_path, **kwargs):
    """Post processing for raw schematic_model, including sync_to_restore.

    Models from before `cutoff_version` have their apertures rederived from
    the root elements down and, unless `save_updated_version` is False, are
    saved in the current format with the original file archived.
    """
    old_version = False
    file_version = getattr(schm_model, 'rsk_version', '0.1.0')
    cutoff_version = kwargs.get('cutoff_version', rsk_format_version)
    if version.parse(file_version) < version.parse(cutoff_version):
        old_version = True

    schm_model.sync_to_restore()

    if old_version:
        em = schm_model.ele_model
        for root in em.roots():
            propagate_apertures(em, root.ele_id)

    save_updated_version = kwargs.get('save_updated_version', True)
    if old_version and save_updated_version:
        save_updated_rsk(Path(file_path), schm_model, file_version)
    return schm_model


def save_updated_rsk(file_path: Path, schm_model, file_version):
    """ rename file_path to file_path_version# and save new file_path version """
    forig = file_path.stem
    cur_vers = version.parse(file_version).public
    fname_archive = forig + "_v" + cur_vers.replace('.', '')
    f_archive = file_path.with_name(fname_archive + file_path.suffix)
    file_path.rename(f_archive)
    logger.info("Archived original file as %s", f_archive.name)

    schm_model.save_model(file_path)
    new_vers = version.parse(schm_model.rsk_version).public
    logger.info("Updated %s from version %s -> %s.", file_path.name,
                cur_vers, new_vers)


def open_rsk(file_name, mapping=None, **kwargs):
    """ open a raysketch file and populate a schematic model with the data

    Args:
        file_name (str): a filename with a .rsk extension
        mapping: dict mapping old modules to new. If None, use module_repl_010

    Returns:
        if successful, a SchematicModel instance, otherwise, None
    """
    schm_model = None
    str_replacements = module_repl_010 if mapping is None else mapping
    contents = preprocess_rsk(file_name, str_replacements)
    obj_dict = json_tricks.loads(contents)
    if 'schematic_model' in obj_dict:
        schm_model = obj_dict['schematic_model']
        postprocess_rsk(schm_model, file_name, **kwargs)
    else:
        logger.warning("%s doesn't contain a schematic model", file_name)
    return schm_model


def open_model(file_name, **kwargs):
    """ open a file and populate a schematic model with the data

    Args:
        file_name (str): a filename of a supported file type

            - .rsk - a raysketch JSON encoded file

        kwargs (dict): keyword args passed to the reader functions

    Returns:
        if successful, a SchematicModel instance, otherwise, None
    """
    file_pth = Path(file_name)
    file_extension = file_pth.suffix.lower()
    if file_extension == '.rsk':
        return open_rsk(file_pth, **kwargs)
    logger.warning("unsupported file type: %s", file_extension)
    return None
