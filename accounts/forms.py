from django import forms
from django.contrib.auth import get_user_model
from django.contrib.auth.forms import AuthenticationForm, UserCreationForm

User = get_user_model()


class EmailUserCreationForm(UserCreationForm):
    """Sign-up by email; the username is copied from it."""

    class Meta:
        model = User
        fields = ("email", "first_name", "last_name")
        widgets = {
            "email": forms.EmailInput(attrs={"placeholder": "you@example.com", "autofocus": True}),
        }
        error_messages = {
            "email": {"required": "Email is required"},
        }

    def clean_email(self):
        email = self.cleaned_data["email"].lower()
        if User.objects.filter(email__iexact=email).exists():
            raise forms.ValidationError("An account with this email already exists")
        return email

    def save(self, commit=True):
        user = super().save(commit=False)
        user.username = user.username or user.email
        if commit:
            user.save()
        return user


class EmailAuthenticationForm(AuthenticationForm):
    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        # AuthenticationForm always names the login field "username"
        self.fields["username"].label = "Email"
        self.fields["username"].widget.attrs["placeholder"] = "Email address"
