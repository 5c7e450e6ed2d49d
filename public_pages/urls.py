from django.urls import path
from . import views

app_name = 'public_pages'

urlpatterns = [
    path('', views.landing_page, name='home'),
    path('robots.txt', views.robots_txt, name='robots_txt'),
]
