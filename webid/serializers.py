from rest_framework import serializers

from .profiles import AccountTypes


class OmitEmptySerializer(serializers.Serializer):
    def to_representation(self, instance):
        data = super().to_representation(instance)
        return {k: v for k, v in data.items() if v is not None}


class SocialAccountSerializer(OmitEmptySerializer):
    type = serializers.ChoiceField(choices=AccountTypes.choices)
    handle = serializers.CharField()
    url = serializers.CharField(required=False)


class PronounsSerializer(serializers.Serializer):
    subject = serializers.CharField()
    object = serializers.CharField(allow_blank=True)
    possessive = serializers.CharField(allow_blank=True)


class ColorSchemeSerializer(serializers.Serializer):
    background = serializers.CharField()
    highlight = serializers.CharField()


class ProfileSerializer(OmitEmptySerializer):
    webid = serializers.CharField()
    name = serializers.CharField(required=False)
    nickname = serializers.CharField(required=False)
    image = serializers.CharField(required=False)
    email = serializers.CharField(required=False)
    homepage = serializers.CharField(required=False)
    birthday = serializers.CharField(required=False)
    age = serializers.IntegerField(required=False)
    organization = serializers.CharField(required=False)
    role = serializers.CharField(required=False)
    bio = serializers.CharField(required=False, allow_blank=True)
    pronouns = PronounsSerializer(required=False)
    social_accounts = SocialAccountSerializer(many=True)
    storage = serializers.ListField(child=serializers.CharField())
    inbox = serializers.CharField(required=False)
    colors = ColorSchemeSerializer(required=False)
    languages = serializers.ListField(child=serializers.CharField())
    friends = serializers.ListField(child=serializers.CharField())
