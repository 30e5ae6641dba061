from django.urls import path

from .views import ShareView, SharedBrainView

app_name = 'sharing'

urlpatterns = [
    path('share', ShareView.as_view(), name='share'),
    path('<str:share_hash>', SharedBrainView.as_view(), name='shared-brain'),
]
