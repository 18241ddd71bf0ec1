import math

from tm25rays.header import SanityCheck, SpectralTable, TM25Header


def test_sanity_check_collects_messages():
    sc = SanityCheck()
    sc.fatal(False, "nothing")
    sc.non_fatal(False, "nothing")
    assert sc.msg == "" and not sc.fatal_errors and not sc.nonfatal_errors
    sc.fatal(True, "a")
    sc.non_fatal(True, "b")
    assert sc.msg == "fatal error: a\nnonfatal error: b\n"
    assert sc.fatal_errors and sc.nonfatal_errors


def test_default_header_has_zero_rays():
    rv = TM25Header().sanity_check()
    assert rv.fatal_errors
    assert not rv.nonfatal_errors
    assert rv.msg == "fatal error: 4.7.1.6: # of rays is zero\n"


def test_header_with_rays_is_clean():
    rv = TM25Header(n_rays=10).sanity_check()
    assert rv.msg == ""
    assert not rv.fatal_errors and not rv.nonfatal_errors


def test_default_values():
    h = TM25Header()
    assert h.version == 2013
    assert math.isnan(h.phi_v)
    assert h.additional_info == "none"
    assert h.spectra == [] and h.column_names == []


def test_wavelength_per_ray_without_range_is_nonfatal():
    h = TM25Header(n_rays=1, spectrum_type=2, lambda_flag=True)
    rv = h.sanity_check()
    assert not rv.fatal_errors
    assert rv.nonfatal_errors
    assert "4.7.1.11: min. wavelength not positive" in rv.msg


def test_wavelength_per_ray_with_range_is_clean():
    h = TM25Header(n_rays=1, spectrum_type=2, lambda_flag=True,
                   lambda_min=400.0, lambda_max=700.0)
    assert h.sanity_check().msg == ""


def test_spectrum_type_two_needs_lambda_flag():
    h = TM25Header(n_rays=1, spectrum_type=2, lambda_min=400.0, lambda_max=700.0)
    rv = h.sanity_check()
    assert "4.7.2.4: spectrum type is 2, but wavelength flag not set" in rv.msg


def test_missing_flux_flags():
    rv = TM25Header(n_rays=1, rad_flux_flag=False).sanity_check()
    assert "4.7.2.5: both rad and lum flux flags are missing" in rv.msg
    assert rv.fatal_errors


def test_bad_flux_values():
    rv = TM25Header(n_rays=1, phi=-1.0).sanity_check()
    assert "4.7.1.5: radiant flux is not positive normalized" in rv.msg
    rv = TM25Header(n_rays=1, phi=math.inf).sanity_check()
    assert rv.fatal_errors


def test_spectra_count_mismatch():
    h = TM25Header(n_rays=1, spectra=[SpectralTable(idx=1, lambdas=[500.0], weights=[1.0])])
    rv = h.sanity_check()
    assert "4.7.4: # of spectra" in rv.msg
    h.n_spectra = 1
    assert h.sanity_check().msg == ""


def test_bad_spectral_table():
    h = TM25Header(n_rays=1, n_spectra=1,
                   spectra=[SpectralTable(idx=0, lambdas=[-1.0], weights=[-0.5])])
    rv = h.sanity_check()
    assert "4.7.4: index 0 must be > 0 in spectrum # 1" in rv.msg
    assert "non positive wavelength" in rv.msg
    assert "negative weight" in rv.msg


def test_column_names_mismatch():
    h = TM25Header(n_rays=1, column_names=["extra"])
    assert "4.7.5: # of additional names" in h.sanity_check().msg
    h.n_addtl_items = 1
    assert h.sanity_check().msg == ""


def test_spectrum_index_flag_requires_type_four():
    rv = TM25Header(n_rays=1, spectrum_index_flag=True).sanity_check()
    assert "4.7.2.8: spectrum index flag set but spectrum type 1 is not 4" in rv.msg