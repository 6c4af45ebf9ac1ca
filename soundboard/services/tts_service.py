import logging
from typing import Optional

from google.api_core.exceptions import GoogleAPIError
from google.auth.exceptions import GoogleAuthError
from google.cloud import texttospeech

from soundboard.core.config import Settings, settings
from soundboard.core.exceptions import SynthesisError

logger = logging.getLogger(__name__)


class SpeechSynthesizer:
    """Google Cloud Text-to-Speech with one fixed neutral MP3 voice."""

    def __init__(
        self,
        client: Optional[texttospeech.TextToSpeechClient],
        language_code: str = "id-ID",
        timeout: float = 30.0,
    ):
        self.client = client
        self.voice = texttospeech.VoiceSelectionParams(
            language_code=language_code,
            ssml_gender=texttospeech.SsmlVoiceGender.NEUTRAL,
        )
        self.audio_config = texttospeech.AudioConfig(
            audio_encoding=texttospeech.AudioEncoding.MP3,
        )
        self.timeout = timeout

    @classmethod
    def from_settings(cls, config: Settings = settings) -> "SpeechSynthesizer":
        # A missing key file must not stop the rest of the API from serving.
        try:
            client = texttospeech.TextToSpeechClient.from_service_account_file(
                config.GCP_CREDENTIALS_FILE,
                client_options={"quota_project_id": config.GCP_PROJECT_ID} if config.GCP_PROJECT_ID else None,
            )
        except (GoogleAuthError, OSError, ValueError) as e:
            logger.error("Error initializing Text-to-Speech client: %s", e)
            client = None
        return cls(client, language_code=config.TTS_LANGUAGE_CODE, timeout=config.TTS_TIMEOUT)

    def synthesize(self, text: str) -> bytes:
        """Blocking call returning MP3 bytes for ``text``."""
        if self.client is None:
            raise SynthesisError("Error generating speech: Text-to-Speech client is not configured")
        try:
            response = self.client.synthesize_speech(
                input=texttospeech.SynthesisInput(text=text),
                voice=self.voice,
                audio_config=self.audio_config,
                timeout=self.timeout,
            )
        except (GoogleAPIError, GoogleAuthError) as e:
            raise SynthesisError(f"Error generating speech: {e}") from e
        return response.audio_content

    def close(self) -> None:
        if self.client is not None:
            self.client.transport.close()
