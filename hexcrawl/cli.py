"""CLI interface for the hexcrawl engine."""

import logging
from pathlib import Path
from typing import Optional

import click

from hexcrawl import config
from hexcrawl.biome_generator import apply_biome, generate_biome
from hexcrawl.flood_fill import apply_flood_fill, flood_fill_hexes
from hexcrawl.hex_coords import grid_coordinates
from hexcrawl.hex_map import create_map
from hexcrawl.schemas import BiomeConfig, BiomeType, HexCoord, MapData


def _load_map(map_path: Path) -> Optional[MapData]:
    if not map_path.exists():
        click.echo(f"Map not found at {map_path}")
        click.echo("Run 'hexcrawl new' first")
        return None
    return MapData.model_validate_json(map_path.read_text())


def _save_map(hex_map: MapData, output_path: Path) -> None:
    output_path.parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, "w") as f:
        f.write(hex_map.model_dump_json(indent=2))


@click.group()
@click.option("--log-level", default=None, help="Logging level (default from HEXCRAWL_LOG_LEVEL)")
def cli(log_level: Optional[str]):
    """Hexcrawl map engine"""
    logging.basicConfig(
        level=(log_level or config.LOG_LEVEL).upper(),
        format=config.LOG_FORMAT,
    )


@cli.command()
@click.argument("name")
@click.option("--width", default=20, help="Grid width in hexes")
@click.option("--height", default=15, help="Grid height in hexes")
@click.option("--output", default="map.json", help="Output file")
def new(name: str, width: int, height: int, output: str):
    """Create an empty map."""
    hex_map = create_map(name, width, height)
    _save_map(hex_map, Path(output))
    click.echo(f"Created map '{name}' ({width}x{height})")
    click.echo(f"Saved to {output}")


@cli.command()
@click.option("--map", "map_file", default="map.json", help="Map file")
@click.option(
    "--biome",
    default=BiomeType.MIXED.value,
    type=click.Choice([b.value for b in BiomeType]),
    help="Biome profile",
)
@click.option("--density", default=0.7, type=click.FloatRange(0, 1), help="Chance a hex gets terrain")
@click.option(
    "--landmark-chance",
    default=0.1,
    type=click.FloatRange(0, 1),
    help="Chance a generated hex gets a landmark",
)
@click.option("--seed", default=None, type=float, help="Seed for reproducible output")
@click.option("--fill-grid", is_flag=True, help="Cover the whole visible grid")
@click.option("--output", default=None, help="Output file (default: overwrite map)")
def generate(
    map_file: str,
    biome: str,
    density: float,
    landmark_chance: float,
    seed: Optional[float],
    fill_grid: bool,
    output: Optional[str],
):
    """Generate biome terrain onto a map."""
    map_path = Path(map_file)
    hex_map = _load_map(map_path)
    if hex_map is None:
        return

    biome_config = BiomeConfig(
        biome_type=biome,
        density=density,
        landmark_chance=landmark_chance,
        seed=seed,
    )
    coordinates = grid_coordinates(hex_map.dimensions) if fill_grid else None
    cells = generate_biome(hex_map.dimensions, biome_config, coordinates)
    hex_map = apply_biome(hex_map, cells)

    _save_map(hex_map, Path(output) if output else map_path)
    landmarks = sum(1 for c in cells if c.landmark)
    click.echo(f"Generated {len(cells)} cells ({landmarks} landmarks)")


@cli.command()
@click.option("--map", "map_file", default="map.json", help="Map file")
@click.option("--q", default=0, help="Start Q coordinate")
@click.option("--r", default=0, help="Start R coordinate")
@click.option("--terrain", default=None, help="New terrain")
@click.option("--landmark", default=None, help="New landmark")
@click.option("--clear", is_flag=True, help="Clear content instead of writing")
@click.option("--max-hexes", default=config.FLOOD_FILL_MAX_HEXES, help="Upper bound on filled hexes")
@click.option("--output", default=None, help="Output file (default: overwrite map)")
def fill(
    map_file: str,
    q: int,
    r: int,
    terrain: Optional[str],
    landmark: Optional[str],
    clear: bool,
    max_hexes: int,
    output: Optional[str],
):
    """Flood fill the region connected to a hex."""
    if terrain is None and landmark is None and not clear:
        click.echo("Nothing to write: pass --terrain, --landmark or --clear")
        return

    map_path = Path(map_file)
    hex_map = _load_map(map_path)
    if hex_map is None:
        return

    start = HexCoord(q=q, r=r)
    hexes = flood_fill_hexes(start, hex_map, max_hexes=max_hexes, bounds=hex_map.dimensions)
    if not hexes:
        click.echo(f"Nothing to fill at ({q},{r})")
        return

    hex_map = apply_flood_fill(
        hexes,
        hex_map,
        new_terrain=terrain,
        new_landmark=landmark,
        clear_existing=clear,
    )
    _save_map(hex_map, Path(output) if output else map_path)
    click.echo(f"Filled {len(hexes)} hexes")


@cli.command()
@click.option("--map", "map_file", default="map.json", help="Map file")
def info(map_file: str):
    """Show map statistics."""
    hex_map = _load_map(Path(map_file))
    if hex_map is None:
        return

    cells = hex_map.cells.values()
    click.echo(f"Map: {hex_map.name}")
    click.echo(f"  Size: {hex_map.dimensions.width}x{hex_map.dimensions.height}")
    click.echo(f"  Cells: {len(hex_map.cells)}")
    click.echo(f"  Terrain: {sum(1 for c in cells if c.terrain)}")
    click.echo(f"  Landmarks: {sum(1 for c in cells if c.landmark)}")
    click.echo(f"  Explored: {sum(1 for c in cells if c.is_explored)}")
    click.echo(f"  Players: {len(hex_map.player_positions)}")


def main():
    cli()


if __name__ == "__main__":
    main()
