"""
StitchCraft - Export Service

Turns the layer stack into placement records for an external stitching
step and serializes them as JSON or CSV.

shift_x/shift_y are the top-left of each layer's rotated bounding box, so
they line up with an image rotated by cv2.warpAffine with the canvas
expanded to the rotated bounds.
"""

import json
import logging

from constants import EXPORT_FIELDS, EXPORT_JSON_FILENAME, EXPORT_CSV_FILENAME
from utils.number_utils import round_half_up, round_to_hundredths

logger = logging.getLogger('Export')

FORMAT_JSON = 'json'
FORMAT_CSV = 'csv'

DEFAULT_FILENAMES = {
    FORMAT_JSON: EXPORT_JSON_FILENAME,
    FORMAT_CSV: EXPORT_CSV_FILENAME,
}


def select_export_layers(layers, checked_ids):
    """Checked layers if any are checked, otherwise all; always in z-order"""
    if checked_ids:
        return [layer for layer in layers if layer.id in checked_ids]
    return list(layers)


def build_export_records(layers, checked_ids=()):
    """Placement records for the export subset

    Args:
        layers: Layer sequence in z-order
        checked_ids: Ids ticked for export (empty = export everything)

    Returns:
        List of dicts keyed filename, shift_x, shift_y, rotate, layer_order.
        layer_order counts from 0 within the exported subset.
    """
    return [
        {
            'filename': layer.name,
            'shift_x': round_half_up(layer.x),
            'shift_y': round_half_up(layer.y),
            'rotate': round_to_hundredths(layer.rotation),
            'layer_order': index,
        }
        for index, layer in enumerate(select_export_layers(layers, checked_ids))
    ]


def records_to_json(records):
    return json.dumps(records, indent=2, ensure_ascii=False)


def _quote_csv(text):
    return '"' + text.replace('"', '""') + '"'


def records_to_csv(records):
    """Header line plus one row per record, newline-joined, no trailing newline"""
    lines = [','.join(EXPORT_FIELDS)]
    for record in records:
        lines.append(','.join([
            _quote_csv(record['filename']),
            str(record['shift_x']),
            str(record['shift_y']),
            str(record['rotate']),
            str(record['layer_order']),
        ]))
    return '\n'.join(lines)


def export_data(layers, checked_ids, fmt):
    """Serialize the export subset

    Args:
        layers: Layer sequence
        checked_ids: Ids ticked for export
        fmt: FORMAT_JSON or FORMAT_CSV

    Returns:
        The serialized text, or None when there is nothing to export

    Raises:
        ValueError: Unknown format
    """
    if fmt not in DEFAULT_FILENAMES:
        raise ValueError(f"Unknown export format: {fmt}")

    records = build_export_records(layers, checked_ids)
    if not records:
        logger.debug("Nothing to export")
        return None

    if fmt == FORMAT_JSON:
        return records_to_json(records)
    return records_to_csv(records)


def save_export_to_file(content, filename):
    """Write exported text to disk

    Raises:
        OSError: If file write fails
    """
    with open(filename, 'w', encoding='utf-8', newline='') as f:
        f.write(content)
    logger.info(f"Export saved to {filename}")
