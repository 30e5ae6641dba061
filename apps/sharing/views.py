import logging

from django.contrib.auth import get_user_model
from django.urls import reverse
from django.utils.translation import gettext_lazy as _
from rest_framework import permissions
from rest_framework.response import Response
from rest_framework.views import APIView

from apps.content.models import Content
from apps.content.serializers import SharedContentSerializer, absolute_api_url
from apps.core.exceptions import ShareLinkNotFound

from .serializers import ShareToggleSerializer
from .services import ShareLinkManager

logger = logging.getLogger(__name__)

User = get_user_model()


class ShareView(APIView):
    """
    POST /api/v1/brain/share
    {"share": true}  -> issue (or return the existing) public link
    {"share": false} -> remove the link
    """
    permission_classes = [permissions.IsAuthenticated]
    manager_class = ShareLinkManager

    def get_manager(self):
        return self.manager_class()

    def post(self, request, *args, **kwargs):
        serializer = ShareToggleSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        share = serializer.validated_data['share']
        result = self.get_manager().set_sharing(request.user.pk, share)

        if not share:
            return Response({'success': True, 'message': _("Share link removed successfully")})

        share_hash, created = result
        path = reverse('sharing:shared-brain', kwargs={'share_hash': share_hash})
        return Response({
            'success': True,
            'message': _("Share link created successfully") if created else _("Share link already exists"),
            'hash': share_hash,
            'share_link': absolute_api_url(request, path),
        })


class SharedBrainView(APIView):
    """
    GET /api/v1/brain/<hash>
    Public, read-only view of everything the link's owner has saved.
    """
    permission_classes = [permissions.AllowAny]
    authentication_classes = []
    manager_class = ShareLinkManager

    def get(self, request, share_hash, *args, **kwargs):
        owner_id = self.manager_class().resolve(share_hash)
        owner = User.objects.filter(pk=owner_id).first()
        if owner is None:
            logger.warning(f"Share link {share_hash} points at missing user {owner_id}")
            raise ShareLinkNotFound(_("User not found"))

        contents = Content.objects.filter(owner=owner).prefetch_related('tags').order_by('-created_at')
        return Response({
            'username': owner.username,
            'content': SharedContentSerializer(contents, many=True, context={'request': request}).data,
        })
