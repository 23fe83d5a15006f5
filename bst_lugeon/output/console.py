"""Funciones para renderizar salida en consola (rich/plain/json)."""

import json
from typing import Dict

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from bst_lugeon.analysis.permeability import permeability_status
from bst_lugeon.analysis.recalculation import well_geometry
from bst_lugeon.core.constants import FLOW_DILATION, FLOW_LAMINAR, FLOW_TURBULENT, FLOW_WASHOUT
from bst_lugeon.core.models import Well
from bst_lugeon.output.formatters import format_depth_range, format_number


def build_summary(well: Well) -> Dict:
    """Resumen serializable del pozo recalculado.

    Example:
        >>> build_summary(Well(id="w1"))["stages"]
        []
    """
    geometry = well_geometry(well)
    return {
        "well": well.well_no or well.id,
        "geometry": {
            "diameter_mm": geometry.diameter_mm,
            "manometer_height_m": geometry.manometer_height_m,
            "groundwater_m": geometry.groundwater_m,
        },
        "stages": [
            {
                "id": stage.id,
                "interval": format_depth_range(stage.start_depth, stage.end_depth),
                "pressure_type": stage.pressure_type,
                "max_pressure": stage.max_pressure,
                "reversible": bool(stage.reversible),
                "representative_lugeon": format_number(stage.representative_lugeon),
                "flow_type": stage.flow_type,
                "permeability_status": permeability_status(stage.representative_lugeon),
                "measurements": [
                    {
                        "step": m.step_number,
                        "applied_pressure": m.applied_pressure,
                        "total_loss": m.total_loss,
                        "effective_pressure": format_number(m.effective_pressure),
                        "lugeon": format_number(m.lugeon),
                    }
                    for m in stage.measurements
                ],
            }
            for stage in well.stages
        ],
        "lithology": [
            {
                "interval": format_depth_range(s.start_depth, s.end_depth),
                "formation": s.formation,
                "lugeon": format_number(s.lugeon),
                "permeability_status": s.permeability_status or "-",
            }
            for s in well.lithology
        ],
    }


def print_well_console(well: Well, console_format: str = "rich") -> None:
    """Renderiza el pozo por consola en formato rich/plain/json.

    Args:
        well: Pozo ya recalculado
        console_format: Formato de salida ("rich", "plain", "json")

    Example:
        >>> print_well_console(Well(id="w1"), "json")  # doctest: +SKIP
    """
    summary = build_summary(well)

    if console_format == "json":
        print(json.dumps(summary, ensure_ascii=False, indent=2))
        return

    if console_format == "rich":
        _print_rich_console(summary)
        return

    _print_plain_console(summary)


def _print_rich_console(summary: Dict) -> None:
    """Imprime en formato rich con colores y tablas."""
    console = Console()
    geo = summary["geometry"]
    console.rule(f"POZO {summary['well']}")
    console.print(
        Panel(
            f"Diámetro: {geo['diameter_mm']:.0f} mm | Manómetro: {geo['manometer_height_m']:.2f} m | "
            f"YASS: {geo['groundwater_m']:.2f} m",
            title="Geometría",
        )
    )

    # Color por régimen de flujo
    flow_style = {
        FLOW_LAMINAR: "bold green",
        FLOW_TURBULENT: "bold yellow",
        FLOW_DILATION: "bold magenta",
        FLOW_WASHOUT: "bold red",
    }

    for stage in summary["stages"]:
        t = Table(show_header=True, header_style="bold")
        t.add_column("Escalón", justify="right")
        t.add_column("P man (bar)", justify="right")
        t.add_column("Pérdida (L/10 min)", justify="right")
        t.add_column("Pe (bar)", justify="right")
        t.add_column("Lugeon", justify="right")
        for m in stage["measurements"]:
            t.add_row(
                str(m["step"]),
                format_number(m["applied_pressure"], 1),
                str(m["total_loss"]),
                m["effective_pressure"],
                m["lugeon"],
            )
        style = flow_style.get(stage["flow_type"], "bold")
        title = (
            f"Etapa {stage['interval']} | {stage['pressure_type']} | "
            f"Lu={stage['representative_lugeon']} | [{style}]{stage['flow_type']}[/]"
        )
        console.print(Panel(t, title=title, subtitle=stage["permeability_status"]))

    if summary["lithology"]:
        lt = Table(show_header=True, header_style="bold")
        lt.add_column("Intervalo")
        lt.add_column("Formación")
        lt.add_column("Lugeon", justify="right")
        lt.add_column("Permeabilidad")
        for s in summary["lithology"]:
            lt.add_row(s["interval"], s["formation"], s["lugeon"], s["permeability_status"])
        console.print(Panel(lt, title="Log litológico"))


def _print_plain_console(summary: Dict) -> None:
    """Imprime en formato plain text sin colores."""
    geo = summary["geometry"]
    print(f"\n=== Pozo {summary['well']} ===")
    print(
        f"Geometría: diámetro={geo['diameter_mm']:.0f} mm, "
        f"manómetro={geo['manometer_height_m']:.2f} m, YASS={geo['groundwater_m']:.2f} m"
    )
    for stage in summary["stages"]:
        print(f"Etapa {stage['interval']} ({stage['pressure_type']}, max={stage['max_pressure']} bar)")
        for m in stage["measurements"]:
            print(
                f"  - #{m['step']}: P={m['applied_pressure']} bar, Q={m['total_loss']} L/10min, "
                f"Pe={m['effective_pressure']} bar, Lu={m['lugeon']}"
            )
        print(f"  Lugeon representativo: {stage['representative_lugeon']} ({stage['permeability_status']})")
        print(f"  Régimen de flujo: {stage['flow_type']}")
    if summary["lithology"]:
        print("Log litológico:")
        for s in summary["lithology"]:
            print(f"  - {s['interval']} {s['formation']}: Lu={s['lugeon']} ({s['permeability_status']})")
