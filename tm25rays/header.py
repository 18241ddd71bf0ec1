"""The header of a TM-25 ray file and its consistency check."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

_FLT_MIN = 1.1754943508222875e-38
_FLT_MAX = 3.4028234663852886e38


def _fmt(x: float) -> str:
    return f"{x:f}"


def _is_normal(r: float) -> bool:
    return math.isfinite(r) and _FLT_MIN <= abs(r) <= _FLT_MAX


def _good_flux(r: float) -> bool:
    return r == 0.0 or math.isnan(r) or (_is_normal(r) and r > 0.0)


def _not_zero_or_one(i: int) -> bool:
    return int(i) < 0 or int(i) > 1


@dataclass
class SpectralTable:
    """A spectral table (4.7.4); ``idx`` counts from 1."""

    idx: int = 0
    lambdas: list[float] = field(default_factory=list)
    weights: list[float] = field(default_factory=list)


@dataclass
class SanityCheck:
    """Collected messages of a header check."""

    msg: str = ""
    nonfatal_errors: bool = False
    fatal_errors: bool = False

    def fatal(self, test: bool, message: str) -> None:
        """Record a fatal error when ``test`` holds."""
        if not test:
            return
        self.msg += "fatal error: " + message + "\n"
        self.fatal_errors = True

    def non_fatal(self, test: bool, message: str) -> None:
        """Record a non fatal error when ``test`` holds."""
        if not test:
            return
        self.msg += "nonfatal error: " + message + "\n"
        self.nonfatal_errors = True


@dataclass
class TM25Header:
    """Header fields of a TM-25 ray file, named after their sections."""

    version: int = 2013  # 4.7.1.2
    creation_method: int = 0  # 4.7.1.3, simulation
    phi_v: float = math.nan  # 4.7.1.4 luminous flux
    phi: float = 1.0  # 4.7.1.5 radiant flux
    n_rays: int = 0  # 4.7.1.6
    file_date_time: str = "2013-09-04T08:30:29+01:00"  # 4.7.1.7
    start_position: int = 0  # 4.7.1.8
    spectrum_type: int = 1  # 4.7.1.9, single wavelength
    wavelength: float = 500.0  # 4.7.1.10
    lambda_min: float = math.nan  # 4.7.1.11
    lambda_max: float = math.nan  # 4.7.1.12
    n_spectra: int = 0  # 4.7.1.13
    n_addtl_items: int = 0  # 4.7.1.14
    rad_flux_flag: bool = True  # 4.7.2.3
    lambda_flag: bool = False  # 4.7.2.4
    lum_flux_flag: bool = False  # 4.7.2.5
    stokes_flag: bool = False  # 4.7.2.6
    tristimulus_flag: bool = False  # 4.7.2.7
    spectrum_index_flag: bool = False  # 4.7.2.8
    name: str = "unknown"  # 4.7.3.1
    manufacturer: str = "unknown"
    model_creator: str = "unknown"
    rayfile_creator: str = "unknown"
    equipment: str = "unknown"
    camera: str = "unknown"
    lightsource: str = "unknown"
    additional_info: str = "none"  # 4.7.3.8
    data_reference: str = "unknown"  # 4.7.3.9
    spectra: list[SpectralTable] = field(default_factory=list)  # 4.7.4
    column_names: list[str] = field(default_factory=list)  # 4.7.5
    additional_text: str = ""  # 4.7.6

    def sanity_check(self) -> SanityCheck:
        """Check the header for consistency and return the findings."""
        rv = SanityCheck()
        st = self.spectrum_type
        # 4.7.1 file header block
        rv.fatal(self.version != 2013,
                 f"4.7.1.2: version is not 2013 -> {self.version}")
        rv.fatal(not _good_flux(self.phi_v),
                 "4.7.1.4: luminous flux is not positive normalized, zero or NaN -> "
                 + _fmt(self.phi_v))
        rv.fatal(not _good_flux(self.phi),
                 "4.7.1.5: radiant flux is not positive normalized, zero or NaN -> "
                 + _fmt(self.phi))
        rv.fatal(self.n_rays == 0, "4.7.1.6: # of rays is zero")
        rv.fatal(st < 0 or st > 4,
                 f"4.7.1.9: spectrum type is not 0,1,2,3,4 -> {st}")
        rv.fatal(st == 1 and not self.wavelength > 0,
                 "4.7.1.10: spectrum type is 1 (single wavelength) but wavelength is not positive -> "
                 + _fmt(self.wavelength))
        minmaxlam = 2 <= st <= 4
        rv.non_fatal(minmaxlam and not self.lambda_min > 0,
                     "4.7.1.11: min. wavelength not positive -> " + _fmt(self.lambda_min))
        rv.non_fatal(minmaxlam and not self.lambda_max > 0,
                     "4.7.1.12: max. wavelength not positive -> " + _fmt(self.lambda_max))
        rv.non_fatal(minmaxlam and not self.lambda_max >= self.lambda_min,
                     "4.7.1.12: max wavelength not >= min wavelength -> "
                     + _fmt(self.lambda_max) + " vs. " + _fmt(self.lambda_min))
        rv.fatal(self.n_spectra < 0, f"4.7.1.13: # of spectra < 0 -> {self.n_spectra}")
        rv.fatal(self.n_addtl_items < 0,
                 f"4.7.1.14: # of addtl items < 0 -> {self.n_addtl_items}")
        # 4.7.2 known data flags
        rad, lam, lum = int(self.rad_flux_flag), int(self.lambda_flag), int(self.lum_flux_flag)
        stokes, tri, sidx = (int(self.stokes_flag), int(self.tristimulus_flag),
                             int(self.spectrum_index_flag))
        rv.fatal(_not_zero_or_one(rad), f"4.7.2.3: radiant flux flag not 0 or 1 -> {rad}")
        rv.fatal(st in (2, 4) and not rad,
                 f"4.7.2.3: spectrum type is {st}, but radiant flux flag is not set")
        rv.fatal(_not_zero_or_one(lam), f"4.7.2.4: wavelength flag not 0 or 1 -> {lam}")
        rv.fatal(st == 2 and not lam, "4.7.2.4: spectrum type is 2, but wavelength flag not set")
        rv.fatal(_not_zero_or_one(lum), f"4.7.2.5: luminous flux flag not 0 or 1 -> {lum}")
        rv.fatal(not rad and not lum, "4.7.2.5: both rad and lum flux flags are missing")
        rv.fatal(st in (2, 4) and bool(lum),
                 f"4.7.2.5: spectrum type is {st}, but lum flux flag is set")
        rv.fatal(_not_zero_or_one(stokes), f"4.7.2.6: stokes flag not 0 or 1 -> {stokes}")
        rv.fatal(bool(stokes) and not rad,
                 "4.7.2.3: stokes flag set but radiant flux flag not set")
        rv.fatal(_not_zero_or_one(tri), f"4.7.2.7: tristimulus flag not 0 or 1 -> {tri}")
        rv.fatal(bool(tri) and not lum,
                 "4.7.2.7: tristimulus flag set but lum flux flag not set")
        rv.fatal(bool(tri) and st != 0,
                 f"4.7.2.7: tristimulus flag set but spectrum type {st} is not 0")
        rv.fatal(_not_zero_or_one(sidx), f"4.7.2.8: spectrum index flag not 0 or 1 -> {sidx}")
        rv.fatal(bool(sidx) and st != 4,
                 f"4.7.2.8: spectrum index flag set but spectrum type {st} is not 4")
        rv.fatal(not sidx and st == 4,
                 "4.7.2.8: spectrum index flag not set but spectrum type is 4")
        # 4.7.4 spectral tables
        rv.fatal(self.n_spectra != len(self.spectra),
                 f"4.7.4: # of spectra (4.7.1.13, {self.n_spectra}) is not equal to number of "
                 f"spectral tables {len(self.spectra)}")
        for i_sp, sp in enumerate(self.spectra, start=1):
            rv.fatal(sp.idx < 1, f"4.7.4: index {sp.idx} must be > 0 in spectrum # {i_sp}")
            for lam_value in sp.lambdas:
                rv.fatal(not lam_value > 0.0,
                         f"4.7.4: non positive wavelength {_fmt(lam_value)} in spectrum {i_sp}")
            for wt in sp.weights:
                rv.fatal(not wt >= 0.0,
                         f"4.7.4: negative weight {_fmt(wt)} in spectrum {i_sp}")
        # 4.7.5 column labels
        rv.fatal(self.n_addtl_items != len(self.column_names),
                 f"4.7.5: # of additional names: {len(self.column_names)} does not match "
                 f"4.7.1.14: {self.n_addtl_items}")
        return rv