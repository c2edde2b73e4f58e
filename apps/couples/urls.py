from django.urls import path
from . import views

app_name = 'couples'

urlpatterns = [
    # POST /couples/request  - Invite a partner by email
    # POST /couples/accept   - Accept an incoming request
    # POST /couples/resend   - Re-send an outgoing invitation
    # GET  /couples/me       - Couple and pending requests
    path('request', views.request_couple_view, name='request'),
    path('accept', views.accept_couple_view, name='accept'),
    path('resend', views.resend_couple_view, name='resend'),
    path('me', views.couple_status_view, name='status'),
]
