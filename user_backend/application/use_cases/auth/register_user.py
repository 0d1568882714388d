# Standard library imports
import logging
from datetime import timedelta
from typing import Optional

# Local application imports
from ....core.exceptions import ConflictError, DispatchError
from ....core.security import TokenCodec
from ....domain.models.user import PendingRegistration, UploadedImage
from ....domain.repositories.user_repository import UserRepository
from ....infrastructure.notifications.email_dispatcher import EmailDispatcher, build_activation_email
from ....infrastructure.storage.image_store import ImageStore
from ...dto.auth_dto import UserRegistrationRequest, RegistrationResponse

logger = logging.getLogger(__name__)

ACTIVATION_TOKEN_TTL = timedelta(minutes=10)


class RegisterUserUseCase:
    """
    Use case for submitting a registration.

    Nothing is persisted here: the submitted data travels inside a signed
    activation token that is emailed to the user and redeemed by
    VerifyUserAccountUseCase.
    """

    def __init__(
        self,
        user_repository: UserRepository,
        image_store: ImageStore,
        token_codec: TokenCodec,
        email_dispatcher: EmailDispatcher,
        activation_key: str,
        client_url: str,
    ) -> None:
        self.user_repository = user_repository
        self.image_store = image_store
        self.token_codec = token_codec
        self.email_dispatcher = email_dispatcher
        self.activation_key = activation_key
        self.client_url = client_url.rstrip("/")

    def build_activation_link(self, token: str) -> str:
        return f"{self.client_url}/api/users/activate/{token}"

    async def execute(
        self,
        request: UserRegistrationRequest,
        image: Optional[UploadedImage],
    ) -> RegistrationResponse:
        """
        Validate a registration, issue its activation token and email it

        Args:
            request: Submitted registration fields
            image: Uploaded profile image (required)

        Returns:
            RegistrationResponse with confirmation message and submitted name

        Raises:
            ConflictError: If the email is taken or no image was uploaded
            FileTooLargeError: If the image exceeds the size limit
            BadRequestError: If the image type is not allowed
            DispatchError: If the activation email could not be sent
        """
        if await self.user_repository.exists_by_email(request.email):
            raise ConflictError("User with this email already exists")

        if image is None:
            raise ConflictError("Image is required")

        self.image_store.validate(image)

        pending = PendingRegistration(
            name=request.name,
            email=request.email,
            phone=request.phone,
            password=request.password,
            address=request.address,
            image=self.image_store.encode(image),
        )
        token = self.token_codec.issue(pending.to_claims(), self.activation_key, ACTIVATION_TOKEN_TTL)

        subject, body = build_activation_email(pending.name, self.build_activation_link(token))
        try:
            await self.email_dispatcher.send(pending.email, subject, body)
        except DispatchError as e:
            # The token is never redeemed and simply expires
            raise DispatchError("Failed to send verification email") from e

        logger.info("Activation email sent for pending registration %s", pending.email)
        return RegistrationResponse(
            message=f"Please go to your {pending.email} for completing your registration process",
            name=pending.name,
        )
