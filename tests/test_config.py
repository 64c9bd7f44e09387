import pytest

from braintree_client import (
    BraintreeConfig,
    ConfigError,
    ConfigParameters,
    Environment,
    build_environment,
    create_gateway,
    load_braintree_config,
    load_env_file,
)

BASE = {
    "BRAINTREE_MERCHANT_ID": "merchant",
    "BRAINTREE_PUBLIC_KEY": "public",
    "BRAINTREE_PRIVATE_KEY": "private",
}


def test_defaults_to_sandbox():
    config = BraintreeConfig.from_mapping(BASE)
    assert config.environment is Environment.SANDBOX
    assert config.base_url == "https://api.sandbox.braintreegateway.com:443"
    assert config.merchant_url == "https://api.sandbox.braintreegateway.com:443/merchants/merchant"
    assert config.timeout_seconds == 60
    assert not config.is_production


def test_environment_is_case_insensitive():
    config = BraintreeConfig.from_mapping({**BASE, "BRAINTREE_ENVIRONMENT": " Production "})
    assert config.environment is Environment.PRODUCTION
    assert config.base_url == "https://api.braintreegateway.com:443"
    assert config.is_production


def test_base_url_override_drops_trailing_slash():
    config = BraintreeConfig.from_mapping(
        {**BASE, "BRAINTREE_ENVIRONMENT": "development", "BRAINTREE_BASE_URL": "http://gateway:3000/"}
    )
    assert config.merchant_url == "http://gateway:3000/merchants/merchant"


@pytest.mark.parametrize("missing", sorted(BASE))
def test_required_keys(missing):
    values = {key: value for key, value in BASE.items() if key != missing}
    with pytest.raises(ConfigError, match=missing):
        BraintreeConfig.from_mapping(values)


def test_blank_values_are_rejected():
    with pytest.raises(ConfigError, match="must not be empty"):
        BraintreeConfig.from_mapping({**BASE, "BRAINTREE_PUBLIC_KEY": "   "})


def test_unknown_environment():
    with pytest.raises(ConfigError, match="BRAINTREE_ENVIRONMENT"):
        BraintreeConfig.from_mapping({**BASE, "BRAINTREE_ENVIRONMENT": "staging"})


@pytest.mark.parametrize("timeout", ["0", "-5", "soon"])
def test_invalid_timeout(timeout):
    with pytest.raises(ConfigError, match="BRAINTREE_TIMEOUT_SECONDS"):
        BraintreeConfig.from_mapping({**BASE, "BRAINTREE_TIMEOUT_SECONDS": timeout})


def test_repr_hides_private_key():
    assert "'private'" not in repr(BraintreeConfig.from_mapping(BASE))


def test_env_file_fills_gaps_but_does_not_override(tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text(
        "# credentials\n"
        "export BRAINTREE_MERCHANT_ID=from-file\n"
        "BRAINTREE_PUBLIC_KEY='quoted-public'\n"
        'BRAINTREE_PRIVATE_KEY="quoted-private"\n'
        "not a variable\n",
        encoding="utf-8",
    )

    variables = build_environment(
        env_file=str(env_file),
        base={"BRAINTREE_MERCHANT_ID": "from-base"},
    )

    assert variables.get("BRAINTREE_MERCHANT_ID") == "from-base"
    assert variables.get("BRAINTREE_PUBLIC_KEY") == "quoted-public"
    assert variables.get("BRAINTREE_PRIVATE_KEY") == "quoted-private"


def test_missing_env_file_is_ignored(tmp_path):
    variables = build_environment(env_file=str(tmp_path / "absent.env"), base={"A": "1"})
    assert dict(variables.variables) == {"A": "1"}


def test_load_env_file_keeps_existing_keys(tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text("A=file\nB=file\n", encoding="utf-8")
    environ = {"A": "existing"}

    merged = load_env_file(str(env_file), environ=environ)

    assert merged == {"A": "existing", "B": "file"}
    assert environ["B"] == "file"


def test_keyword_parameters_win_over_overrides():
    config = load_braintree_config(
        env_file=None,
        base=BASE,
        overrides={"BRAINTREE_MERCHANT_ID": "override"},
        merchant_id="keyword",
        environment=Environment.PRODUCTION,
        timeout_seconds=5,
    )
    assert config.merchant_id == "keyword"
    assert config.environment is Environment.PRODUCTION
    assert config.timeout_seconds == 5


def test_parameter_bundle():
    parameters = ConfigParameters(merchant_id="bundle", public_key="pub", private_key="priv")
    config = load_braintree_config(env_file=None, base={}, parameters=parameters)
    assert (config.merchant_id, config.public_key, config.private_key) == ("bundle", "pub", "priv")


def test_create_gateway_rejects_config_plus_parameters():
    config = BraintreeConfig.from_mapping(BASE)
    with pytest.raises(ValueError):
        create_gateway(config=config, merchant_id="other")


def test_create_gateway_from_parameters():
    gateway = create_gateway(env_file=None, base=BASE, environment="development")
    assert gateway.environment is Environment.DEVELOPMENT
    assert gateway.url_for("/transactions") == "http://localhost:3000/merchants/merchant/transactions"
