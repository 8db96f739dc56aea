from datetime import datetime, timezone
from itertools import product

import pytest
from pydantic import ValidationError

from bluebox import Block, BlockParams, ParamsValidationError, Template, TemplateCreationStatus


@pytest.mark.unit
class TestBlockParams:
    def test_empty_params_fail(self):
        with pytest.raises(ParamsValidationError, match='Must specify "product"'):
            BlockParams().ensure_valid()

    def test_missing_template_fails(self):
        params = BlockParams(product="p", password="x")
        with pytest.raises(ParamsValidationError, match='Must specify "template"'):
            params.ensure_valid()

    def test_password_and_key_together_fail(self):
        params = BlockParams(product="foobar", template="foobar", password="foobar", ssh_public_key="foobar")
        with pytest.raises(ParamsValidationError, match="Only one of"):
            params.ensure_valid()

    def test_neither_password_nor_key_fails(self):
        params = BlockParams(product="foobar", template="foobar")
        with pytest.raises(ParamsValidationError, match="must be specified"):
            params.ensure_valid()

    @pytest.mark.parametrize(
        "product_,template,password,key",
        list(product(["", "p"], ["", "t"], ["", "pw"], ["", "ssh-ed25519 AAAA"])),
    )
    def test_validation_truth_table(self, product_, template, password, key):
        params = BlockParams(product=product_, template=template, password=password, ssh_public_key=key)
        should_fail = not product_ or not template or bool(password) == bool(key)

        if should_fail:
            with pytest.raises(ParamsValidationError):
                params.ensure_valid()
        else:
            params.ensure_valid()

    def test_validation_error_is_value_error(self):
        with pytest.raises(ValueError):
            BlockParams().ensure_valid()

    def test_to_form_omits_unset_fields(self):
        params = BlockParams(product="the-product", template="the-template", password="the-password")

        assert params.to_form() == {
            "product": "the-product",
            "template": "the-template",
            "password": "the-password",
        }

    def test_to_form_uses_wire_names(self):
        params = BlockParams(
            product="p",
            template="t",
            ssh_public_key="ssh-rsa AAAA",
            hostname="web1.example.com",
            username="deploy",
            location="ash",
        )

        form = params.to_form()

        assert form["ssh_public_key"] == "ssh-rsa AAAA"
        assert form["hostname"] == "web1.example.com"
        assert form["username"] == "deploy"
        assert form["location"] == "ash"
        assert "password" not in form

    def test_params_are_immutable(self):
        params = BlockParams(product="p")
        with pytest.raises(ValidationError):
            params.product = "other"  # type: ignore[misc]

    def test_unknown_fields_rejected(self):
        with pytest.raises(ValidationError):
            BlockParams(product="p", ipv6_only=True)  # type: ignore[call-arg]


@pytest.mark.unit
class TestDecoding:
    def test_block_flattens_ip_objects(self):
        block = Block.model_validate_json(
            '{"id": "abcdef", "hostname": "abcdef.example.com",'
            ' "ips": [{"address": "127.0.0.1"}, {"address": "::1"}], "status": "running"}'
        )

        assert block == Block(
            id="abcdef",
            hostname="abcdef.example.com",
            ips=["127.0.0.1", "::1"],
            status="running",
        )

    def test_block_ignores_unknown_keys(self):
        block = Block.model_validate({"id": "x", "ips": [], "status": "queued", "cpu": 2})
        assert block.status == "queued"
        assert not hasattr(block, "cpu")

    def test_block_rejects_wrong_shape(self):
        with pytest.raises(ValidationError):
            Block.model_validate({"id": "x", "ips": "127.0.0.1"})

    def test_template_parses_timezone(self):
        template = Template.model_validate_json(
            '{"id": "abcdef", "description": "foo bar baz", "public": true,'
            ' "created": "2024-05-01T12:30:00+02:00"}'
        )

        assert template.public is True
        assert template.created == datetime(2024, 5, 1, 10, 30, tzinfo=timezone.utc)
        assert template.created.utcoffset() is not None

    def test_template_creation_status(self):
        status = TemplateCreationStatus.model_validate_json('{"status": "abcdef", "text": "queued", "error": 0}')
        assert status == TemplateCreationStatus(status="abcdef", text="queued", error=0)

    @pytest.mark.parametrize(
        "body",
        [
            '{"id": "abcdef", "description": "d", "public": "yes", "created": "2024-05-01T12:30:00Z"}',
            '{"id": "abcdef", "description": "d", "public": true, "created": 0}',
            '{"id": "abcdef", "description": "d", "public": true, "created": "2024-05-01T12:30:00"}',
        ],
        ids=["public-as-string", "created-as-number", "created-without-timezone"],
    )
    def test_template_rejects_mismatched_types(self, body):
        with pytest.raises(ValidationError):
            Template.model_validate_json(body)

    def test_creation_status_rejects_string_error_code(self):
        with pytest.raises(ValidationError):
            TemplateCreationStatus.model_validate_json('{"status": "abcdef", "text": "queued", "error": "0"}')

    def test_block_rejects_numeric_fields(self):
        with pytest.raises(ValidationError):
            Block.model_validate_json('{"id": 42, "hostname": "h", "ips": [], "status": "running"}')
        with pytest.raises(ValidationError):
            Block.model_validate_json('{"id": "x", "hostname": "h", "ips": [{"address": 10}], "status": "running"}')
