import logging
from pathlib import Path

import pandas as pd
import yaml

from .aerofoil import AerofoilBuilder
from .vawt import VAWTSolver

logger = logging.getLogger(__name__)


class TurbineConfig:
    """Aerofoil and solver settings of a VAWT case read from a yaml file"""

    def __init__(self, yaml_file):
        self.turbine = None
        self.read_yaml_file(yaml_file)

    def read_yaml_file(self, yaml_file):
        """Read and process the yaml case file

        The file holds an ``aerofoil`` section (polars, symmetry and aspect
        ratio) and an optional ``solver`` section with the keyword arguments
        of :class:`~vawt_dmst.vawt.VAWTSolver`.

        Args:
            yaml_file (string): YAML file containing the case

        Return:
            None
        """
        self.yaml_file_ = Path(yaml_file).resolve()
        with open(self.yaml_file_, 'r') as f:
            self.turbine = yaml.load(f.read(), Loader=yaml.SafeLoader)

        self.aerofoil_cfg = self.turbine['aerofoil']
        self.solver_cfg = self.turbine.get('solver') or {}
        self.turbine['solver'] = self.solver_cfg
        logger.info("Read case %s with %d polars", self.yaml_file_,
                    len(self.aerofoil_cfg['polars']))

    def dump_yaml(self, filename):
        """Dump the case configuration to a yaml file
        Args:
            filename (string): File name to dump the case configuration
        Return:
            None
        """
        with open(filename, 'w') as f:
            yaml.dump(self.turbine, f, default_flow_style=False)

    @property
    def name(self):
        """Aerofoil name"""
        return self.aerofoil_cfg.get('name', self.yaml_file_.stem)

    def set_tsr(self, tsr):
        """Set the tip speed ratio
        Args:
            tsr (double): Tip speed ratio
        Return:
            None
        """
        self.solver_cfg['tsr'] = float(tsr)

    def get_tsr(self):
        """Get the tip speed ratio
        Args:
            None
        Return:
            tsr (double): Tip speed ratio, None if the solver default is used
        """
        tsr = self.solver_cfg.get('tsr')
        return None if tsr is None else float(tsr)

    def polar_data(self, polar):
        """Polar table of one entry of the ``polars`` list

        Args:
            polar (dict): Entry with ``file`` or inline ``aoa``/``cl``/``cd``
        Return:
            data (pd.DataFrame or Path): Inline table, or the polar file path
            resolved against the directory of the yaml file
        """
        if 'file' in polar:
            return self.yaml_file_.parent / polar['file']
        return pd.DataFrame({k: polar[k] for k in ('aoa', 'cl', 'cd')})

    def aerofoil_builder(self):
        """Return an AerofoilBuilder loaded with the configured polars"""
        cfg = self.aerofoil_cfg
        bld = AerofoilBuilder()
        for polar in cfg['polars']:
            data = self.polar_data(polar)
            if isinstance(data, Path):
                bld.load_csv(data, float(polar['re']),
                             polar.get('delimiter', ','))
            else:
                bld.load_data(data, float(polar['re']))
        bld.symmetric(bool(cfg.get('symmetric', False)))
        if 'aspect_ratio' in cfg:
            bld.set_aspect_ratio(float(cfg['aspect_ratio']))
        bld.request_aspect_ratio_correction(
            bool(cfg.get('aspect_ratio_correction', False)))
        return bld

    def build_aerofoil(self):
        """Build the configured Aerofoil"""
        return self.aerofoil_builder().build()

    def solver(self, aerofoil=None):
        """Create a VAWTSolver for the case

        Args:
            aerofoil (Aerofoil): Reuse an existing aerofoil instead of
                building the configured one
        Return:
            solver (VAWTSolver): Solver with the configured settings
        """
        if aerofoil is None:
            aerofoil = self.build_aerofoil()
        return VAWTSolver(aerofoil, **self.solver_cfg)
