from django import forms

from .models import Chirp


class ChirpForm(forms.ModelForm):
    class Meta:
        model = Chirp
        fields = ("message",)
        widgets = {
            "message": forms.Textarea(
                attrs={"rows": 3, "placeholder": "What's on your mind?", "maxlength": 255}
            ),
        }
        error_messages = {
            "message": {
                "required": "The message field is required.",
                "max_length": "The message may not be greater than 255 characters.",
            },
        }

