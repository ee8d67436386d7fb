import pytest
from raph.aws_profiles.profile_manager import (
    load_profiles,
    parse_profile_names,
    read_aws_profiles,
    verify_profile,
    SETUP_GUIDE_URL,
)
from raph.errors import ConfigUnreadableError, NoProfilesFoundError, ProfileNotFoundError
from raph.utils.settings import Settings

def test_read_aws_profiles(configured_home):
    """Test listing profiles from a typical config file."""
    profiles = read_aws_profiles(configured_home)

    # Named profiles in file order, default last
    assert profiles == ["dev", "prod", "default"]

def test_read_aws_profiles_minimal_config(write_config, fake_home):
    """Test the exact list derived from two bare headers."""
    write_config("[profile dev]\n[profile prod]\n")

    assert read_aws_profiles(fake_home) == ["dev", "prod", "default"]

def test_read_aws_profiles_accepts_string_home(write_config, fake_home):
    """Test passing the home directory as a string."""
    write_config("[profile dev]\n")

    assert read_aws_profiles(str(fake_home)) == ["dev", "default"]

@pytest.mark.parametrize("count", [1, 3, 10])
def test_read_aws_profiles_length(write_config, fake_home, count):
    """Test that N distinct profiles give N+1 entries with one default at the end."""
    write_config("".join(f"[profile p{i}]\nregion = us-east-1\n" for i in range(count)))

    profiles = read_aws_profiles(fake_home)

    assert len(profiles) == count + 1
    assert profiles.count("default") == 1
    assert profiles[-1] == "default"

def test_read_aws_profiles_missing_config(tmp_path):
    """Test that a missing config file is fatal rather than an empty list."""
    with pytest.raises(ConfigUnreadableError) as excinfo:
        read_aws_profiles(tmp_path)

    assert excinfo.value.path == tmp_path / ".aws" / "config"
    assert "AWS config could not be read" in str(excinfo.value)

def test_read_aws_profiles_no_profiles(write_config, fake_home, capsys):
    """Test the guidance and fallback list when no profiles are declared."""
    write_config("[default]\nregion = us-east-1\n")

    with pytest.raises(NoProfilesFoundError) as excinfo:
        read_aws_profiles(fake_home)

    # default is still offered
    assert excinfo.value.profiles == ["default"]

    out = capsys.readouterr().out
    assert "No profiles found." in out
    assert SETUP_GUIDE_URL in out

def test_load_profiles_falls_back_to_default(write_config, fake_home):
    """Test that callers can continue with default when nothing is configured."""
    write_config("")

    assert load_profiles(Settings(home=fake_home)) == ["default"]

def test_load_profiles_propagates_unreadable_config(tmp_path):
    """Test that an unreadable config still aborts through load_profiles."""
    with pytest.raises(ConfigUnreadableError):
        load_profiles(Settings(home=tmp_path))

def test_parse_profile_names_ignores_other_sections():
    """Test that only [profile <name>] headers are picked up."""
    data = "[default]\n[sso-session corp]\n[profile a]\n[services s]\n[profile b]\n"

    assert parse_profile_names(data) == ["a", "b"]

def test_parse_profile_names_keeps_name_characters():
    """Test that the name is everything between 'profile ' and ']'."""
    data = "[profile team.dev-admin_1]\n[profile with space]\n"

    assert parse_profile_names(data) == ["team.dev-admin_1", "with space"]

def test_parse_profile_names_deduplicates():
    """Test that repeated headers only appear once, in first-seen order."""
    data = "[profile b]\n[profile a]\n[profile b]\n"

    assert parse_profile_names(data) == ["b", "a"]

def test_parse_profile_names_skips_explicit_default():
    """Test that [profile default] doesn't produce a second default entry."""
    assert parse_profile_names("[profile default]\n[profile dev]\n") == ["dev"]

def test_verify_profile_default():
    """Test that default is always valid."""
    # Even when the list doesn't contain it
    verify_profile([], "default")
    verify_profile(["dev"], "default")

def test_verify_profile_present():
    """Test validating a configured profile."""
    verify_profile(["dev", "prod", "default"], "prod")

def test_verify_profile_missing():
    """Test validating an unknown profile."""
    with pytest.raises(ProfileNotFoundError) as excinfo:
        verify_profile(["dev", "prod", "default"], "staging")

    # The requested name is echoed back
    assert excinfo.value.profile == "staging"
    assert str(excinfo.value) == "Profile 'staging' not found"
