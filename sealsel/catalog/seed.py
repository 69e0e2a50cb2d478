"""
Seed catalog loaded into every new selector.

Example parts only; extend at runtime with SealSelector.add_seal or a
CatalogImporter.
"""

from sealsel.models.inputs import MotionType
from sealsel.models.seal import SealRecord


SEED_CATALOG: tuple[SealRecord, ...] = (
    SealRecord(
        part_number="SS-6210-40V",
        inner_diameter_mm=95.2,
        cross_section_mm=4.0,
        outer_diameter_mm=103.2,
        max_pressure_bar=200,
        max_temp_c=150,
        compatible_materials={"NBR", "FKM"},
        motion_compatibility=MotionType.BOTH,
    ),
    SealRecord(
        part_number="SS-6212-50V",
        inner_diameter_mm=100.5,
        cross_section_mm=5.0,
        outer_diameter_mm=110.5,
        max_pressure_bar=250,
        max_temp_c=160,
        compatible_materials={"FKM", "FFKM"},
        motion_compatibility=MotionType.DYNAMIC,
        max_speed_m_per_s=5,
    ),
    SealRecord(
        part_number="SS-6225-50V",
        inner_diameter_mm=125.0,
        cross_section_mm=5.0,
        outer_diameter_mm=135.0,
        max_pressure_bar=300,
        max_temp_c=200,
        compatible_materials={"FFKM"},
        motion_compatibility=MotionType.STATIC,
    ),
    SealRecord(
        part_number="SS-6230-60F",
        inner_diameter_mm=180.0,
        cross_section_mm=6.0,
        outer_diameter_mm=192.0,
        max_pressure_bar=400,
        max_temp_c=220,
        compatible_materials={"FFKM"},
        motion_compatibility=MotionType.BOTH,
    ),
)
