"""Tests for prompts.py module."""

from gem_secrets.models import FieldSpec
from gem_secrets.prompts import prompt_field, validate_k8s_name


class TestValidateK8sName:
    """Tests for Kubernetes name validation."""

    def test_valid_simple_name(self):
        """Test valid simple name."""
        assert validate_k8s_name("metrics-admin-secret") is True

    def test_valid_name_with_dots(self):
        """Test valid name with dots."""
        assert validate_k8s_name("gem.admin") is True

    def test_empty_name(self):
        """Test empty name returns error."""
        result = validate_k8s_name("")
        assert isinstance(result, str)
        assert "empty" in result.lower()

    def test_name_too_long(self):
        """Test name exceeding max length."""
        result = validate_k8s_name("a" * 254)
        assert isinstance(result, str)
        assert "253" in result

    def test_name_with_uppercase(self):
        """Test name with uppercase letters is invalid."""
        result = validate_k8s_name("AdminSecret")
        assert isinstance(result, str)
        assert "lowercase" in result.lower()

    def test_name_with_underscore(self):
        """Test name with underscore is invalid."""
        assert isinstance(validate_k8s_name("admin_secret"), str)


class TestPromptField:
    """Tests for interactive field prompts."""

    def test_plain_field_uses_text(self, mock_text_prompt, mock_password_prompt):
        """Test a plain field is asked with a text prompt and trimmed."""
        mock_text_prompt.return_value.unsafe_ask.return_value = "  admin \n"

        answer = prompt_field(FieldSpec("adminUser", "Enter admin username"))

        assert answer == "admin"
        assert mock_text_prompt.call_args[0][0] == "Enter admin username"
        mock_password_prompt.assert_not_called()

    def test_secret_field_uses_password(self, mock_text_prompt, mock_password_prompt):
        """Test a secret field hides input."""
        mock_password_prompt.return_value.unsafe_ask.return_value = "s3cret"

        answer = prompt_field(FieldSpec("adminPassword", "Enter admin password", secret=True))

        assert answer == "s3cret"
        mock_text_prompt.assert_not_called()

    def test_k8s_name_field_is_validated(self, mock_text_prompt):
        """Test Kubernetes name fields get the name validator."""
        mock_text_prompt.return_value.unsafe_ask.return_value = "gem"

        prompt_field(FieldSpec("namespace", "Enter the Kubernetes namespace", k8s_name=True))

        assert mock_text_prompt.call_args.kwargs["validate"] is validate_k8s_name

    def test_plain_field_not_validated(self, mock_text_prompt):
        """Test other fields accept any input."""
        mock_text_prompt.return_value.unsafe_ask.return_value = "x"

        prompt_field(FieldSpec("adminUser", "Enter admin username"))

        assert mock_text_prompt.call_args.kwargs["validate"] is None

    def test_none_answer_becomes_empty(self, mock_text_prompt):
        """Test a None answer is returned as an empty string."""
        mock_text_prompt.return_value.unsafe_ask.return_value = None

        assert prompt_field(FieldSpec("adminUser", "Enter admin username")) == ""
